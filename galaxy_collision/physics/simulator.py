"""Main simulator controller."""

import logging
from typing import Optional

import numpy as np

from galaxy_collision.exceptions import InvariantViolation
from galaxy_collision.physics import simulation
from galaxy_collision.physics.commands import FastForward, Pause, Restart, Resume, ReverseTime
from galaxy_collision.physics.configuration import Configuration
from galaxy_collision.physics.integrators import get_integrator
from galaxy_collision.physics.integrators.base import Integrator
from galaxy_collision.physics.integrators.euler import EulerIntegrator
from galaxy_collision.physics.state import SimulationState
from galaxy_collision.physics.timestep import calculate_time_step

logger = logging.getLogger(__name__)


class Simulator:
    """Main simulation controller.

    Owns the configuration, the simulation state and the integrator, and
    turns control commands into state changes. Two stages: uninitialized
    (no bodies yet) and running.
    """

    def __init__(
        self,
        configuration: Optional[Configuration] = None,
        integrator: Optional[Integrator] = None,
        time_step: float = 1.0
    ):
        """Initialize simulator.

        Args:
            configuration: Initial parameters (default: Configuration())
            integrator: Integrator to use (default: semi-implicit Euler)
            time_step: Simulation time advanced per frame
        """
        self.configuration = (configuration or Configuration()).validate()
        self.integrator = integrator or EulerIntegrator()
        self.state = SimulationState(time_step=time_step)

    @classmethod
    def from_config(cls, config) -> "Simulator":
        """Build a simulator from a run-level `Config`."""
        return cls(
            configuration=config.to_configuration(),
            integrator=get_integrator(config.integrator),
            time_step=calculate_time_step(config.screen_refresh_rate_fps)
        )

    @property
    def running(self) -> bool:
        return self.state.initialized

    @property
    def time(self) -> float:
        return self.state.time

    def set_initial(self):
        """Generate the bodies: uninitialized -> running."""
        simulation.set_initial(self.configuration, self.state)

    def update(self) -> bool:
        """Advance one frame, generating the bodies on the first frame.

        Returns:
            True if the bodies moved
        """
        if not self.running:
            self.set_initial()
            return True
        return simulation.update(self.configuration, self.state, self.integrator)

    def snapshot(self, dtype=np.float64) -> np.ndarray:
        """Flat (x, y, z, x, y, z, ...) positions for the renderer."""
        return self.state.snapshot(dtype)

    def dispatch(self, command):
        """Apply a control command between frames.

        Args:
            command: Pause, Resume, ReverseTime, FastForward or Restart
        """
        if isinstance(command, Pause):
            self.state.paused = True
        elif isinstance(command, Resume):
            self.state.paused = False
        elif isinstance(command, ReverseTime):
            self.state.time_direction *= -1
            logger.info("Time direction is now %+d", self.state.time_direction)
        elif isinstance(command, FastForward):
            self.state.fast_forward_seconds = float(command.seconds)
        elif isinstance(command, Restart):
            if command.configuration is not None:
                # Validate before dropping the old bodies
                self.configuration = command.configuration.validate()
            simulation.restart(self.state)
        else:
            raise InvariantViolation(f"Unknown command: {command!r}")
