"""Simulation engine: command replay and Parquet trace persistence."""

from mars_rover.simulation.engine import run_rover
from mars_rover.simulation.persistence import read_trace, trace_columns, write_trace

__all__ = ["read_trace", "run_rover", "trace_columns", "write_trace"]
