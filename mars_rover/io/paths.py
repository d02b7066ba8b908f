"""Path construction helpers for run artifacts."""

from __future__ import annotations

from pathlib import Path


def default_trace_path(plot_path: Path) -> Path:
    """Return the trace written alongside a plot when no trace path was given."""
    plot_path = Path(plot_path)
    return plot_path.parent / f"{plot_path.stem}_trace.parquet"
