"""Gravitational acceleration from the two galaxy cores."""

import numpy as np

G = 1.0  # Gravitational constant (normalized units)


def core_accelerations(positions: np.ndarray, core_masses: np.ndarray) -> np.ndarray:
    """Acceleration of every body due to the two cores.

    Stars are test particles: they feel both cores but attract nothing.
    Core 0 feels core 1 and vice versa. The inverse-square law is not
    softened, so a body sitting exactly on a core gets a non-finite
    acceleration instead of an exception.

    Args:
        positions: Positions of all bodies (n, 3), cores first
        core_masses: Masses of the two cores (2,)

    Returns:
        Accelerations (n, 3)
    """
    accelerations = np.zeros_like(positions)

    with np.errstate(divide='ignore', invalid='ignore'):
        for core in range(2):
            # a_i = G m_c (r_c - r_i) / |r_c - r_i|^3
            r_diff = positions[core] - positions
            distances_cubed = np.sum(r_diff * r_diff, axis=1) ** 1.5

            # No self-interaction: r_diff is zero there, so 0 / inf = 0
            distances_cubed[core] = np.inf

            accelerations += G * core_masses[core] * r_diff / distances_cubed[:, np.newaxis]

    return accelerations
