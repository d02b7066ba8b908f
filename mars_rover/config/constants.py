"""Centralized constants for rover simulation runs.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

DEFAULT_GRID_WIDTH = 10
"""Default grid width in cells."""

DEFAULT_GRID_HEIGHT = 10
"""Default grid height in cells."""

MAX_GRID_DIMENSION = 100
"""Largest width or height accepted from the command line."""

ORIENTATION_LETTERS: tuple[str, ...] = ("N", "E", "S", "W")
"""Orientation letters in clockwise order."""

COMMAND_LETTERS: tuple[str, ...] = ("F", "B", "L", "R")
"""Command vocabulary: Forward, Backward, turn Left, turn Right."""
