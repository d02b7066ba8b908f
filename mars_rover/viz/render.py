"""Matplotlib rendering of rover trajectories from Parquet traces."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from mars_rover.simulation.persistence import read_trace
from mars_rover.viz.theme import DEFAULT_THEME, Theme

_HEADING_MARKERS: dict[str, str] = {"N": "^", "E": ">", "S": "v", "W": "<"}


def build_visit_grid(rows: list[dict[str, object]], width: int, height: int) -> np.ndarray:
    """Return (H, W) int array counting how often each cell appears in *rows*.

    Out-of-bounds positions are silently skipped.
    """
    grid = np.zeros((height, width), dtype=int)
    for row in rows:
        x, y = int(row["x"]), int(row["y"])  # type: ignore[call-overload]
        if 0 <= x < width and 0 <= y < height:
            grid[y, x] += 1
    return grid


def _draw_grid_lines(ax: plt.Axes, width: int, height: int, theme: Theme) -> None:
    for x in range(width + 1):
        ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
    for y in range(height + 1):
        ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)


def _draw_trajectory(
    ax: plt.Axes,
    rows: list[dict[str, object]],
    width: int,
    height: int,
    theme: Theme,
    title: str | None,
) -> None:
    grid = build_visit_grid(rows, width, height)
    xs = [int(row["x"]) for row in rows]  # type: ignore[call-overload]
    ys = [int(row["y"]) for row in rows]  # type: ignore[call-overload]

    ax.imshow(grid, cmap=theme.visit_cmap, origin="lower", aspect="equal")
    if max(width, height) <= 50:
        _draw_grid_lines(ax, width, height, theme)
    ax.plot(xs, ys, color=theme.path_color, linewidth=1.5, zorder=2)

    blocked = [row for row in rows if row["blocked"]]
    if blocked:
        ax.scatter(
            [int(row["x"]) for row in blocked],  # type: ignore[call-overload]
            [int(row["y"]) for row in blocked],  # type: ignore[call-overload]
            marker="x",
            color=theme.blocked_color,
            s=40,
            zorder=3,
            label="Blocked move",
        )

    start, end = rows[0], rows[-1]
    ax.scatter(
        [xs[0]],
        [ys[0]],
        marker=_HEADING_MARKERS.get(str(start["orientation"]), "o"),
        color=theme.start_color,
        s=90,
        zorder=4,
        label=f"Start {xs[0]},{ys[0]},{start['orientation']}",
    )
    ax.scatter(
        [xs[-1]],
        [ys[-1]],
        marker=_HEADING_MARKERS.get(str(end["orientation"]), "o"),
        color=theme.end_color,
        s=90,
        zorder=4,
        label=f"End {xs[-1]},{ys[-1]},{end['orientation']}",
    )

    ax.set_xlim(-0.5, width - 0.5)
    ax.set_ylim(-0.5, height - 0.5)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(title or f"Rover trajectory ({len(rows) - 1} commands)", fontsize=10)
    ax.legend(loc="upper center", bbox_to_anchor=(0.5, -0.12), ncol=3, fontsize=8, frameon=False)


def render_trajectory(
    trace_path: Path,
    output_path: Path,
    width: int,
    height: int,
    theme: Theme = DEFAULT_THEME,
    title: str | None = None,
) -> Path:
    """Render the path recorded in *trace_path* onto a width x height grid.

    Cells are shaded by visit count, the path is drawn as a polyline, and
    moves absorbed by the grid edge are marked with a cross.
    """
    rows = read_trace(trace_path)
    if not rows:
        raise ValueError(f"Trace is empty: {trace_path}")

    output_path = Path(output_path)
    side = max(3.0, min(10.0, 0.4 * max(width, height)))
    fig, ax = plt.subplots(figsize=(side, side))
    try:
        _draw_trajectory(ax, rows, width, height, theme, title)
        fig.tight_layout()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=150)
    finally:
        plt.close(fig)
    return output_path
