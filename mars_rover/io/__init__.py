"""I/O layer: Arrow schemas and artifact paths."""

from mars_rover.io.paths import default_trace_path
from mars_rover.io.schemas import TRACE_COLUMNS, TRACE_SCHEMA

__all__ = ["TRACE_COLUMNS", "TRACE_SCHEMA", "default_trace_path"]
