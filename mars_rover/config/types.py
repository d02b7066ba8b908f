"""Configuration and result dataclasses for rover runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from mars_rover.config.constants import (
    COMMAND_LETTERS,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_GRID_WIDTH,
    MAX_GRID_DIMENSION,
    ORIENTATION_LETTERS,
)

if TYPE_CHECKING:
    from mars_rover.domain.snapshot import RoverSnapshot

__all__ = ["RunConfig", "RunResult", "validate_commands", "validate_direction"]


def validate_direction(direction: str) -> None:
    """Require a single N/E/S/W letter in either ASCII case."""
    if not direction.isascii() or direction.upper() not in ORIENTATION_LETTERS:
        raise ValueError("Direction must be one of: N, S, E, W.")


def validate_commands(commands: str) -> None:
    """Require only F/B/L/R letters in either ASCII case."""
    if not commands.isascii() or any(
        char not in COMMAND_LETTERS for char in commands.upper()
    ):
        raise ValueError("Commands string may contain only F, B, L, R characters.")


@dataclass(frozen=True)
class RunConfig:
    """One validated rover run as requested from the command line.

    Limits here are stricter than the rover core: the grid is capped at
    ``MAX_GRID_DIMENSION`` per side. Each check raises ``ValueError`` with a
    message naming the violated constraint.
    """

    x: int
    y: int
    direction: str
    commands: str = ""
    width: int = DEFAULT_GRID_WIDTH
    height: int = DEFAULT_GRID_HEIGHT
    trace_path: Path | None = None
    plot_path: Path | None = None

    def __post_init__(self) -> None:
        validate_direction(self.direction)
        validate_commands(self.commands)
        if self.width < 1 or self.height < 1:
            raise ValueError("Grid width and height must be at least 1.")
        if self.width > MAX_GRID_DIMENSION or self.height > MAX_GRID_DIMENSION:
            raise ValueError(f"Grid width and height maximum is {MAX_GRID_DIMENSION}.")
        if not 0 <= self.x < self.width:
            raise ValueError(
                f"Initial X must be within grid bounds (0 to {self.width - 1})."
            )
        if not 0 <= self.y < self.height:
            raise ValueError(
                f"Initial Y must be within grid bounds (0 to {self.height - 1})."
            )


@dataclass(frozen=True)
class RunResult:
    """Outcome of one rover run."""

    final: RoverSnapshot
    steps: int
    blocked_moves: int
    trace_path: Path | None = None
    plot_path: Path | None = None

    @property
    def final_position(self) -> str:
        return self.final.as_string()

    def to_summary(self) -> dict[str, object]:
        """JSON-serializable summary for CLI output."""
        return {
            "x": self.final.x,
            "y": self.final.y,
            "orientation": self.final.orientation.value,
            "final_position": self.final_position,
            "steps": self.steps,
            "blocked_moves": self.blocked_moves,
            "trace_path": str(self.trace_path) if self.trace_path is not None else None,
            "plot_path": str(self.plot_path) if self.plot_path is not None else None,
        }
