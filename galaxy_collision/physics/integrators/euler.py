"""Semi-implicit (symplectic) Euler integrator."""

from typing import Tuple

import numpy as np

from galaxy_collision.physics.gravity import core_accelerations
from galaxy_collision.physics.integrators.base import Integrator


class EulerIntegrator(Integrator):
    """Semi-implicit Euler method - first order, symplectic.

    Velocities are updated first and the new velocities move the bodies,
    which keeps orbits bounded instead of spiralling outwards like the
    explicit Euler method does.
    """

    @property
    def name(self) -> str:
        return "euler"

    @property
    def order(self) -> int:
        return 1

    def step(self, positions, velocities, core_masses, dt: float) -> Tuple[np.ndarray, np.ndarray]:
        """Euler step: v_new = v + a(r)*dt, r_new = r + v_new*dt."""
        accelerations = core_accelerations(positions, core_masses)

        new_velocities = velocities + accelerations * dt
        new_positions = positions + new_velocities * dt

        return new_positions, new_velocities
