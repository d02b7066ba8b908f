"""Mars rover grid simulation."""

from mars_rover.config.types import RunConfig, RunResult
from mars_rover.domain import (
    Command,
    InvalidCommandChars,
    InvalidGridSize,
    InvalidOrientation,
    Orientation,
    OutOfBounds,
    RoverError,
    RoverSnapshot,
    RoverState,
    StepRecord,
)
from mars_rover.simulation.engine import run_rover

__version__ = "0.1.0"

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
    "RunConfig",
    "RunResult",
    "StepRecord",
    "run_rover",
]
