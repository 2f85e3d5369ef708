"""Leapfrog (kick-drift-kick) integrator."""

from typing import Tuple

import numpy as np

from galaxy_collision.physics.gravity import core_accelerations
from galaxy_collision.physics.integrators.base import Integrator


class VerletIntegrator(Integrator):
    """Velocity Verlet in kick-drift-kick form - second order, symplectic.

    1. v_half = v + 0.5*a(r)*dt
    2. r_new = r + v_half*dt
    3. v_new = v_half + 0.5*a(r_new)*dt

    The scheme is time-reversible: a step with -dt undoes a step with dt up
    to round-off, which suits the reverse-time control.
    """

    @property
    def name(self) -> str:
        return "verlet"

    @property
    def order(self) -> int:
        return 2

    def step(self, positions, velocities, core_masses, dt: float) -> Tuple[np.ndarray, np.ndarray]:
        v_half = velocities + core_accelerations(positions, core_masses) * (0.5 * dt)
        new_positions = positions + v_half * dt
        new_velocities = v_half + core_accelerations(new_positions, core_masses) * (0.5 * dt)

        return new_positions, new_velocities
