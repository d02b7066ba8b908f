"""Visualization theme presets for trajectory rendering.

Themes are frozen dataclasses that group all styling constants together so
renderers can swap palettes via the ``--theme`` CLI argument.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of trajectory style tokens."""

    visit_cmap: str = "Blues"
    path_color: str = "#FF5722"
    start_color: str = "#4CAF50"
    end_color: str = "#2196F3"
    blocked_color: str = "#D32F2F"
    grid_line_color: str = "#CCCCCC"


DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    visit_cmap="Greys",
    path_color="#d62728",
    start_color="#2ca02c",
    end_color="#1f77b4",
    blocked_color="#000000",
    grid_line_color="#E0E0E0",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
