"""Compass orientation and the command vocabulary.

Members are declared in clockwise order; turning is index arithmetic
modulo four over that order.
"""

from __future__ import annotations

from enum import Enum

from mars_rover.domain.errors import InvalidCommandChars, InvalidOrientation


class Orientation(Enum):
    """Heading of the rover on the grid."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @classmethod
    def from_letter(cls, raw: object) -> Orientation:
        """Parse a case-insensitive single letter (or pass a member through)."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str) or not raw.isascii():
            raise InvalidOrientation(raw)
        try:
            return cls(raw.upper())
        except ValueError as exc:
            raise InvalidOrientation(raw) from exc

    def clockwise(self) -> Orientation:
        members = list(Orientation)
        return members[(members.index(self) + 1) % len(members)]

    def counter_clockwise(self) -> Orientation:
        members = list(Orientation)
        return members[(members.index(self) - 1) % len(members)]

    @property
    def step(self) -> tuple[int, int]:
        """Unit ``(dx, dy)`` for one forward move; north is +y."""
        return _STEPS[self]


_STEPS: dict[Orientation, tuple[int, int]] = {
    Orientation.NORTH: (0, 1),
    Orientation.EAST: (1, 0),
    Orientation.SOUTH: (0, -1),
    Orientation.WEST: (-1, 0),
}


class Command(Enum):
    """Single rover instruction."""

    FORWARD = "F"
    BACKWARD = "B"
    LEFT = "L"
    RIGHT = "R"


def parse_commands(raw: str) -> tuple[Command, ...]:
    """Parse every character of *raw*, ignoring ASCII case.

    The whole string is checked before anything is returned, so a bad
    character anywhere rejects the sequence as a unit. Only ASCII letters
    are case-folded; characters such as U+FB00 that uppercase to command
    letters are rejected.
    """
    valid = {command.value for command in Command}
    valid |= {letter.lower() for letter in valid}
    invalid = "".join(sorted({char for char in raw if char not in valid}))
    if invalid:
        raise InvalidCommandChars(invalid)
    return tuple(Command(char.upper()) for char in raw)
