"""
Galaxy Collision - two galaxies colliding, simulated frame by frame.

Features:
- Two massive cores on a bound Kepler orbit
- Massless stars on circular rings around each core
- Semi-implicit Euler and leapfrog integrators
- Pause, reverse time, fast forward and restart controls
- 3D rendering with matplotlib
- CLI interface
"""

__version__ = "0.1.0"

from galaxy_collision.exceptions import (
    ConfigurationError,
    GalaxyCollisionError,
    InvariantViolation,
    NumericDegeneracy,
)
from galaxy_collision.physics.configuration import Configuration
from galaxy_collision.physics.simulator import Simulator

__all__ = [
    "Configuration",
    "Simulator",
    "GalaxyCollisionError",
    "ConfigurationError",
    "InvariantViolation",
    "NumericDegeneracy",
]
