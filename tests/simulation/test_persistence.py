"""Tests for Parquet trace persistence."""

from __future__ import annotations

from pathlib import Path

import pyarrow.parquet as pq

from mars_rover.domain.orientation import Command, Orientation
from mars_rover.domain.snapshot import RoverSnapshot, StepRecord
from mars_rover.io.schemas import TRACE_SCHEMA
from mars_rover.simulation.persistence import read_trace, trace_columns, write_trace

INITIAL = RoverSnapshot(0, 0, Orientation.NORTH)
RECORDS = [
    StepRecord(1, Command.FORWARD, 0, 1, Orientation.NORTH),
    StepRecord(2, Command.LEFT, 0, 1, Orientation.WEST),
    StepRecord(3, Command.FORWARD, 0, 1, Orientation.WEST, blocked=True),
]


def test_trace_columns_start_with_initial_state() -> None:
    columns = trace_columns(INITIAL, RECORDS)
    assert columns["step"] == [0, 1, 2, 3]
    assert columns["command"] == ["", "F", "L", "F"]
    assert columns["orientation"] == ["N", "N", "W", "W"]
    assert columns["blocked"] == [False, False, False, True]


def test_write_trace_matches_schema(tmp_path: Path) -> None:
    path = write_trace(INITIAL, RECORDS, tmp_path / "nested" / "trace.parquet")
    assert path.exists()
    table = pq.read_table(path)
    assert set(table.column_names) == set(TRACE_SCHEMA.names)
    assert table.num_rows == len(RECORDS) + 1


def test_read_trace_returns_rows_in_step_order(tmp_path: Path) -> None:
    path = write_trace(INITIAL, RECORDS, tmp_path / "trace.parquet")
    rows = read_trace(path)
    assert [row["step"] for row in rows] == [0, 1, 2, 3]
    assert rows[-1] == {
        "step": 3,
        "command": "F",
        "x": 0,
        "y": 1,
        "orientation": "W",
        "blocked": True,
    }


def test_empty_run_writes_initial_row_only(tmp_path: Path) -> None:
    rows = read_trace(write_trace(INITIAL, [], tmp_path / "trace.parquet"))
    assert rows == [
        {"step": 0, "command": "", "x": 0, "y": 0, "orientation": "N", "blocked": False}
    ]
