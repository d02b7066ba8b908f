"""Typed, immutable views of rover state.

``RoverSnapshot`` captures the rover at one point in time; ``StepRecord``
adds the command that produced it and whether a move hit the grid edge.
"""

from __future__ import annotations

from dataclasses import dataclass

from mars_rover.domain.orientation import Command, Orientation


@dataclass(frozen=True)
class RoverSnapshot:
    """Immutable position and heading."""

    x: int
    y: int
    orientation: Orientation

    def as_string(self) -> str:
        return f"{self.x},{self.y},{self.orientation.value}"


@dataclass(frozen=True)
class StepRecord:
    """State after applying one command (``step`` is 1-based)."""

    step: int
    command: Command
    x: int
    y: int
    orientation: Orientation
    blocked: bool = False
