"""Control messages sent to a running simulation between frames."""

from dataclasses import dataclass
from typing import Optional

from galaxy_collision.physics.configuration import Configuration

# Time offset of the fast forward and rewind buttons
FAST_FORWARD_SECONDS = 5.0


@dataclass(frozen=True)
class Pause:
    pass


@dataclass(frozen=True)
class Resume:
    pass


@dataclass(frozen=True)
class ReverseTime:
    """Flip the direction of time."""


@dataclass(frozen=True)
class FastForward:
    """Jump the simulation by `seconds` of simulation time in a single step.

    Negative values rewind.
    """
    seconds: float = FAST_FORWARD_SECONDS


@dataclass(frozen=True)
class Restart:
    """Start over, optionally with a new configuration."""
    configuration: Optional[Configuration] = None
