"""Parquet schema for rover step traces.

Row 0 of a trace is the initial state and carries an empty ``command``;
row ``n`` is the state after the n-th command.
"""

from __future__ import annotations

import pyarrow as pa

TRACE_SCHEMA_VERSION = 1

TRACE_SCHEMA = pa.schema(
    [
        ("step", pa.int64()),
        ("command", pa.string()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("orientation", pa.string()),
        ("blocked", pa.bool_()),
    ],
    metadata={"schema_version": str(TRACE_SCHEMA_VERSION)},
)

TRACE_COLUMNS: tuple[str, ...] = tuple(TRACE_SCHEMA.names)
