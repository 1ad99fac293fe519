"""Path construction helpers for patrol output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def trail_log_path(out_dir: Path) -> Path:
    """Return path to the baseline trail Parquet file."""
    return logs_dir(out_dir) / "trail.parquet"


def obstruction_log_path(out_dir: Path) -> Path:
    """Return path to the obstruction classification Parquet file."""
    return logs_dir(out_dir) / "obstructions.parquet"


def summary_path(out_dir: Path) -> Path:
    """Return path to the run summary JSON file."""
    return out_dir / "summary.json"
