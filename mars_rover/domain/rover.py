"""Rover state machine on a bounded grid.

Grid edges are walls: a move whose target cell lies outside
``[0, width-1] x [0, height-1]`` is discarded and the rover keeps its
position. Turning is never constrained.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from mars_rover.config.constants import DEFAULT_GRID_HEIGHT, DEFAULT_GRID_WIDTH
from mars_rover.domain.errors import InvalidGridSize, OutOfBounds
from mars_rover.domain.orientation import Command, Orientation, parse_commands
from mars_rover.domain.snapshot import RoverSnapshot, StepRecord

logger = logging.getLogger(__name__)

StepCallback = Callable[[StepRecord], None]


class RoverState:
    """Position, heading and grid bounds of a single rover."""

    def __init__(
        self,
        x: int,
        y: int,
        orientation: str | Orientation,
        width: int = DEFAULT_GRID_WIDTH,
        height: int = DEFAULT_GRID_HEIGHT,
    ) -> None:
        heading = Orientation.from_letter(orientation)
        if width < 1 or height < 1:
            raise InvalidGridSize(width, height)
        if not (0 <= x < width and 0 <= y < height):
            raise OutOfBounds(x, y)

        self._width = width
        self._height = height
        self._x = x
        self._y = y
        self._orientation = heading

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def orientation(self) -> str:
        """Current heading as its single uppercase letter."""
        return self._orientation.value

    @property
    def heading(self) -> Orientation:
        return self._orientation

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def snapshot(self) -> RoverSnapshot:
        return RoverSnapshot(x=self._x, y=self._y, orientation=self._orientation)

    def process_commands(self, commands: str, on_step: StepCallback | None = None) -> None:
        """Apply every command in *commands* in order.

        The string is case-insensitive. It is validated in full before the
        first command runs, so :exc:`InvalidCommandChars` leaves the rover
        untouched. *on_step* receives a :class:`StepRecord` after each command.
        """
        parsed = parse_commands(commands)
        for index, command in enumerate(parsed, start=1):
            blocked = self._apply(command)
            if on_step is not None:
                on_step(
                    StepRecord(
                        step=index,
                        command=command,
                        x=self._x,
                        y=self._y,
                        orientation=self._orientation,
                        blocked=blocked,
                    )
                )

    def final_position_string(self) -> str:
        """Return ``"x,y,O"``."""
        return self.snapshot().as_string()

    def _apply(self, command: Command) -> bool:
        """Run one command; return True when a move was absorbed by a wall."""
        if command is Command.FORWARD:
            return not self._move(1)
        if command is Command.BACKWARD:
            return not self._move(-1)
        if command is Command.LEFT:
            self._orientation = self._orientation.counter_clockwise()
        else:
            self._orientation = self._orientation.clockwise()
        return False

    def _move(self, sign: int) -> bool:
        dx, dy = self._orientation.step
        nx = self._x + sign * dx
        ny = self._y + sign * dy
        if 0 <= nx < self._width and 0 <= ny < self._height:
            self._x = nx
            self._y = ny
            return True
        logger.debug("Move to (%d, %d) blocked by grid edge", nx, ny)
        return False

    def __repr__(self) -> str:
        return (
            f"RoverState(x={self._x}, y={self._y}, orientation={self.orientation!r}, "
            f"width={self._width}, height={self._height})"
        )
