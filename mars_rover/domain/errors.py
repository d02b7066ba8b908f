"""Validation errors raised by the rover core."""

from __future__ import annotations


class RoverError(ValueError):
    """Base class for rejected rover inputs."""


class InvalidOrientation(RoverError):
    def __init__(self, raw: object) -> None:
        super().__init__("Invalid direction. Must be one of: N, S, E, W.")
        self.raw = raw


class InvalidGridSize(RoverError):
    def __init__(self, width: int, height: int) -> None:
        super().__init__("Grid size must be positive integers.")
        self.width = width
        self.height = height


class OutOfBounds(RoverError):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(
            "Initial position must be within grid bounds (0..width-1, 0..height-1)."
        )
        self.x = x
        self.y = y


class InvalidCommandChars(RoverError):
    def __init__(self, invalid: str) -> None:
        super().__init__("Commands string contains invalid characters. Only F,B,L,R allowed.")
        self.invalid = invalid
