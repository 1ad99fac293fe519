"""Parquet persistence helpers for baseline trails and obstruction reports."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from guard_patrol.experiments.obstruction import ObstructionReport
from guard_patrol.io.schemas import OBSTRUCTION_SCHEMA, TRAIL_SCHEMA, TRAIL_SCHEMA_VERSION
from guard_patrol.simulation.tracer import PatrolOutcome, PatrolTrace


def write_trail(trace: PatrolTrace, path: Path) -> None:
    """Write the visited cells of *trace* in first-visit order."""
    columns: dict[str, list[int | str]] = {"order": [], "x": [], "y": [], "heading": []}
    for order, (position, heading) in enumerate(trace.visited.items()):
        columns["order"].append(order)
        columns["x"].append(position.x)
        columns["y"].append(position.y)
        columns["heading"].append(heading.value)
    schema = TRAIL_SCHEMA.with_metadata(
        {
            "schema_version": str(TRAIL_SCHEMA_VERSION),
            "outcome": trace.outcome.value,
            "steps": str(trace.steps),
        }
    )
    table = pa.Table.from_pydict(columns, schema=schema)
    path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(table, path)


def read_trail(path: Path) -> list[dict[str, object]]:
    """Load trail rows written by :func:`write_trail`."""
    return pq.read_table(path).to_pylist()


def write_obstructions(report: ObstructionReport, path: Path) -> None:
    """Write one row per tested candidate, sorted by (y, x)."""
    columns: dict[str, list[int | str | bool]] = {
        "x": [],
        "y": [],
        "outcome": [],
        "induces_loop": [],
    }
    for position in sorted(report.outcomes, key=lambda p: (p.y, p.x)):
        outcome = report.outcomes[position]
        columns["x"].append(position.x)
        columns["y"].append(position.y)
        columns["outcome"].append(outcome.value)
        columns["induces_loop"].append(outcome is PatrolOutcome.LOOP)
    table = pa.Table.from_pydict(columns, schema=OBSTRUCTION_SCHEMA)
    path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(table, path)
