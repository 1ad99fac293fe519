"""CLI entrypoint for patrol simulation and obstruction search.

This module owns CLI argument parsing, config-file resolution, and output.
All domain logic lives in the extracted modules:

- ``guard_patrol.io.parsing``               – map text to grid + agent
- ``guard_patrol.config``                   – configuration dataclasses
- ``guard_patrol.simulation.tracer``        – single patrol runs
- ``guard_patrol.experiments.obstruction``  – loop-inducing obstruction search
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from guard_patrol.config.constants import DEFAULT_WORKERS
from guard_patrol.config.types import CandidatePolicy, SearchConfig
from guard_patrol.domain.errors import PatrolConfigError
from guard_patrol.experiments.obstruction import run_patrol
from guard_patrol.io.parsing import load_map
from guard_patrol.io.paths import obstruction_log_path, summary_path, trail_log_path
from guard_patrol.io.persistence import write_obstructions, write_trail
from guard_patrol.viz.render import render_patrol_figure, render_text_map

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_candidate_policy(raw_policy: str) -> CandidatePolicy:
    """Parse candidate policy from CLI/config."""
    try:
        return CandidatePolicy(raw_policy)
    except ValueError as exc:
        valid = ", ".join(policy.value for policy in CandidatePolicy)
        raise ValueError(f"candidate-policy must be one of {valid}") from exc


def _parse_log_level(raw_level: str) -> str:
    level = raw_level.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log-level must be one of {', '.join(LOG_LEVELS)}")
    return level


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_optional_str(
    cli_val: object, key: str, file_cfg: dict[str, object]
) -> str | None:
    raw = _get_val(cli_val, key, file_cfg, None)
    return None if raw is None else _coerce_str(raw, key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Trace a grid patrol and count loop-inducing obstructions"
    )
    parser.add_argument("map_file", type=Path, nargs="?", default=None)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument(
        "--candidate-policy",
        type=str,
        choices=[policy.value for policy in CandidatePolicy],
        default=None,
    )
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--render",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include the rendered text map in the summary",
    )
    parser.add_argument("--figure", type=Path, default=None, help="Write a PNG of the trail")
    parser.add_argument("--log-level", type=str, default=None, choices=LOG_LEVELS)
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for patrol runs.

    Supports ``--config path/to/config.json``. CLI arguments override
    config-file values; config-file values override built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            loaded = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(loaded, dict):
            parser.error(f"Config file must hold a JSON object: {args.config}")
        file_cfg = loaded

    try:
        log_level = _parse_log_level(
            _coerce_str(_get_val(args.log_level, "log_level", file_cfg, "WARNING"), "log_level")
        )
        map_file_raw = _get_optional_str(args.map_file, "map_file", file_cfg)
        if map_file_raw is None:
            raise ValueError("a map file is required (positional or config 'map_file')")
        candidate_policy = _parse_candidate_policy(
            _coerce_str(
                _get_val(
                    args.candidate_policy,
                    "candidate_policy",
                    file_cfg,
                    CandidatePolicy.TRAIL.value,
                ),
                "candidate_policy",
            )
        )
        workers = _coerce_int(
            _get_val(args.workers, "workers", file_cfg, DEFAULT_WORKERS), "workers"
        )
        out_dir_raw = _get_optional_str(args.out_dir, "out_dir", file_cfg)
        figure_raw = _get_optional_str(args.figure, "figure", file_cfg)
        render = _coerce_bool(_get_val(args.render, "render", file_cfg, False), "render")
        search_config = SearchConfig(candidate_policy=candidate_policy, workers=workers)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    map_path = Path(map_file_raw)
    try:
        grid, agent = load_map(map_path)
    except FileNotFoundError:
        parser.error(f"Map file not found: {map_path}")
    except PatrolConfigError as exc:
        parser.error(f"Invalid map {map_path}: {exc}")
    logger.info("loaded %dx%d map with %d obstacles", grid.width, grid.height, len(grid.obstacles))

    baseline, report, summary = run_patrol(grid, agent, config=search_config)
    payload: dict[str, object] = {"map_file": str(map_path), **summary.to_dict()}

    if render:
        payload["map"] = render_text_map(
            grid,
            baseline,
            start=(agent.start, agent.start_heading),
            loop_positions=report.loop_positions,
        ).splitlines()

    if figure_raw is not None:
        figure_path = render_patrol_figure(
            grid,
            baseline,
            Path(figure_raw),
            start=agent.start,
            loop_positions=report.loop_positions,
        )
        payload["figure"] = str(figure_path)

    if out_dir_raw is not None:
        out_dir = Path(out_dir_raw)
        write_trail(baseline, trail_log_path(out_dir))
        write_obstructions(report, obstruction_log_path(out_dir))
        summary_path(out_dir).write_text(json.dumps(payload, ensure_ascii=False, indent=2))
        logger.info("wrote artifacts to %s", out_dir)

    print(json.dumps(payload, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
