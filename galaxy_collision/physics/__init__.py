"""Physics kernel: initial conditions, gravity and time stepping."""

from galaxy_collision.physics.configuration import Configuration
from galaxy_collision.physics.state import SimulationState
from galaxy_collision.physics.simulator import Simulator

__all__ = ["Configuration", "SimulationState", "Simulator"]
