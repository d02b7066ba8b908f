"""Parquet persistence helpers for rover step traces."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from mars_rover.domain.snapshot import RoverSnapshot, StepRecord
from mars_rover.io.schemas import TRACE_COLUMNS, TRACE_SCHEMA


def trace_columns(
    initial: RoverSnapshot, records: Sequence[StepRecord]
) -> dict[str, list[int | str | bool]]:
    """Build column buffers with the initial state as step 0."""
    columns: dict[str, list[int | str | bool]] = {name: [] for name in TRACE_COLUMNS}
    columns["step"].append(0)
    columns["command"].append("")
    columns["x"].append(initial.x)
    columns["y"].append(initial.y)
    columns["orientation"].append(initial.orientation.value)
    columns["blocked"].append(False)
    for record in records:
        columns["step"].append(record.step)
        columns["command"].append(record.command.value)
        columns["x"].append(record.x)
        columns["y"].append(record.y)
        columns["orientation"].append(record.orientation.value)
        columns["blocked"].append(record.blocked)
    return columns


def write_trace(
    initial: RoverSnapshot, records: Sequence[StepRecord], trace_path: Path
) -> Path:
    """Write a full run trace to *trace_path* and return the path."""
    table = pa.Table.from_pydict(trace_columns(initial, records), schema=TRACE_SCHEMA)
    trace_path = Path(trace_path)
    trace_path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(table, trace_path)
    return trace_path


def read_trace(trace_path: Path) -> list[dict[str, object]]:
    """Load trace rows ordered by step."""
    rows = pq.read_table(trace_path, columns=list(TRACE_COLUMNS)).to_pylist()
    return sorted(rows, key=lambda row: int(row["step"]))  # type: ignore[call-overload]
