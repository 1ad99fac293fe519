"""Parquet schema definitions for patrol artifacts."""

from __future__ import annotations

import pyarrow as pa

TRAIL_SCHEMA_VERSION = 1

TRAIL_SCHEMA = pa.schema(
    [
        ("order", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("heading", pa.string()),
    ]
)

OBSTRUCTION_SCHEMA = pa.schema(
    [
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("outcome", pa.string()),
        ("induces_loop", pa.bool_()),
    ]
)
