"""Configuration layer: constants and typed config dataclasses."""

from mars_rover.config.constants import (
    COMMAND_LETTERS,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_GRID_WIDTH,
    MAX_GRID_DIMENSION,
    ORIENTATION_LETTERS,
)
from mars_rover.config.types import RunConfig, RunResult

__all__ = [
    "COMMAND_LETTERS",
    "DEFAULT_GRID_HEIGHT",
    "DEFAULT_GRID_WIDTH",
    "MAX_GRID_DIMENSION",
    "ORIENTATION_LETTERS",
    "RunConfig",
    "RunResult",
]
