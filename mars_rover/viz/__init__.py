"""Visualization: trajectory rendering and themes."""

from mars_rover.viz.render import build_visit_grid, render_trajectory
from mars_rover.viz.theme import DEFAULT_THEME, PAPER_THEME, Theme, get_theme

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "Theme",
    "build_visit_grid",
    "get_theme",
    "render_trajectory",
]
