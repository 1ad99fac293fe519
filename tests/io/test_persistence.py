"""Tests for guard_patrol.io.persistence Parquet artifacts."""

from __future__ import annotations

from pathlib import Path

import pyarrow.parquet as pq

from guard_patrol.experiments.obstruction import find_loop_obstructions
from guard_patrol.io.paths import obstruction_log_path, summary_path, trail_log_path
from guard_patrol.io.persistence import read_trail, write_obstructions, write_trail
from guard_patrol.io.schemas import OBSTRUCTION_SCHEMA, TRAIL_SCHEMA
from guard_patrol.simulation.tracer import trace_patrol


def test_paths_layout(tmp_path: Path) -> None:
    assert trail_log_path(tmp_path) == tmp_path / "logs" / "trail.parquet"
    assert obstruction_log_path(tmp_path) == tmp_path / "logs" / "obstructions.parquet"
    assert summary_path(tmp_path) == tmp_path / "summary.json"


def test_write_trail_rows_and_metadata(tmp_path: Path, sample_map) -> None:
    grid, agent = sample_map
    trace = trace_patrol(grid, agent)
    path = trail_log_path(tmp_path)
    write_trail(trace, path)

    table = pq.read_table(path)
    assert set(TRAIL_SCHEMA.names).issubset(table.column_names)
    assert table.num_rows == 41
    assert table.schema.metadata[b"outcome"] == b"exited"

    rows = read_trail(path)
    assert rows[0] == {"order": 0, "x": 4, "y": 6, "heading": "^"}
    assert [row["order"] for row in rows] == list(range(41))


def test_write_obstructions(tmp_path: Path, sample_map) -> None:
    grid, agent = sample_map
    report = find_loop_obstructions(grid, agent)
    path = obstruction_log_path(tmp_path)
    write_obstructions(report, path)

    table = pq.read_table(path)
    assert table.schema.equals(OBSTRUCTION_SCHEMA)
    rows = table.to_pylist()
    assert len(rows) == report.candidates_tested
    loop_cells = {(row["x"], row["y"]) for row in rows if row["induces_loop"]}
    assert loop_cells == {(p.x, p.y) for p in report.loop_positions}
    assert all(row["outcome"] in {"exited", "loop", "blocked"} for row in rows)
    assert [(row["y"], row["x"]) for row in rows] == sorted((row["y"], row["x"]) for row in rows)
