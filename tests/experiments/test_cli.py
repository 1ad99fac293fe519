"""Tests for experiments/cli.py: argument resolution and output."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import matplotlib

matplotlib.use("Agg")

import pyarrow.parquet as pq  # noqa: E402
import pytest  # noqa: E402

from guard_patrol.config.types import CandidatePolicy  # noqa: E402
from guard_patrol.experiments.cli import (  # noqa: E402
    _coerce_bool,
    _coerce_int,
    _parse_candidate_policy,
    main,
)

SAMPLE_MAP = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


@pytest.fixture
def map_file(tmp_path: Path) -> Path:
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE_MAP)
    return path


def _run(argv: list[str], capsys: pytest.CaptureFixture[str]) -> dict[str, object]:
    main(argv)
    return json.loads(capsys.readouterr().out)


def test_prints_json_summary(map_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    payload = _run([str(map_file)], capsys)
    assert payload["visited_cells"] == 41
    assert payload["loop_obstructions"] == 6
    assert payload["baseline_outcome"] == "exited"
    assert payload["candidates_tested"] == 40
    assert "map" not in payload


def test_render_includes_text_map(map_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    payload = _run([str(map_file), "--render"], capsys)
    lines = payload["map"]
    assert isinstance(lines, list)
    assert lines[6] == ".#XO^XXXX."


def test_config_file_values_and_cli_override(
    tmp_path: Path, map_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = tmp_path / "config.json"
    config.write_text(
        json.dumps({"map_file": str(map_file), "candidate_policy": "exhaustive", "workers": 1})
    )
    payload = _run(["--config", str(config)], capsys)
    assert payload["candidates_tested"] == 91

    payload = _run(["--config", str(config), "--candidate-policy", "trail"], capsys)
    assert payload["candidates_tested"] == 40


def test_out_dir_writes_artifacts(
    tmp_path: Path, map_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    out_dir = tmp_path / "out"
    payload = _run([str(map_file), "--out-dir", str(out_dir)], capsys)
    assert pq.read_table(out_dir / "logs" / "trail.parquet").num_rows == 41
    assert pq.read_table(out_dir / "logs" / "obstructions.parquet").num_rows == 40
    assert json.loads((out_dir / "summary.json").read_text()) == payload


def test_figure_dispatches_to_renderer(
    tmp_path: Path, map_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    figure = tmp_path / "trail.png"
    with patch(
        "guard_patrol.experiments.cli.render_patrol_figure", return_value=figure
    ) as mock_render:
        payload = _run([str(map_file), "--figure", str(figure)], capsys)
    mock_render.assert_called_once()
    assert payload["figure"] == str(figure)


def test_missing_map_argument_exits() -> None:
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_invalid_map_exits(tmp_path: Path) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("..\n.?\n")
    with pytest.raises(SystemExit):
        main([str(bad)])


def test_missing_map_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing.txt")])


def test_invalid_json_config_exits(tmp_path: Path, map_file: Path) -> None:
    config = tmp_path / "config.json"
    config.write_text("{not json")
    with pytest.raises(SystemExit):
        main([str(map_file), "--config", str(config)])


def test_bad_workers_in_config_exits(tmp_path: Path, map_file: Path) -> None:
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"workers": True}))
    with pytest.raises(SystemExit):
        main([str(map_file), "--config", str(config)])


class TestCoercion:
    def test_coerce_bool(self) -> None:
        assert _coerce_bool("yes", "render") is True
        assert _coerce_bool("off", "render") is False
        with pytest.raises(ValueError, match="render must be a boolean"):
            _coerce_bool("maybe", "render")

    def test_coerce_int(self) -> None:
        assert _coerce_int("3", "workers") == 3
        assert _coerce_int(2.0, "workers") == 2
        with pytest.raises(ValueError):
            _coerce_int(2.5, "workers")
        with pytest.raises(ValueError):
            _coerce_int(True, "workers")
        with pytest.raises(ValueError):
            _coerce_int("many", "workers")

    def test_parse_candidate_policy(self) -> None:
        assert _parse_candidate_policy("exhaustive") is CandidatePolicy.EXHAUSTIVE
        with pytest.raises(ValueError, match="candidate-policy must be one of"):
            _parse_candidate_policy("random")
