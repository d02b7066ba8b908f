"""Domain layer: orientation, rover state machine, snapshots and errors."""

from mars_rover.domain.errors import (
    InvalidCommandChars,
    InvalidGridSize,
    InvalidOrientation,
    OutOfBounds,
    RoverError,
)
from mars_rover.domain.orientation import Command, Orientation, parse_commands
from mars_rover.domain.rover import RoverState
from mars_rover.domain.snapshot import RoverSnapshot, StepRecord

__all__ = [
    "Command",
    "InvalidCommandChars",
    "InvalidGridSize",
    "InvalidOrientation",
    "Orientation",
    "OutOfBounds",
    "RoverError",
    "RoverSnapshot",
    "RoverState",
    "StepRecord",
    "parse_commands",
]
