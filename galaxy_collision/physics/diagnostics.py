"""Diagnostics of the two-core orbit.

Only the cores carry mass, so energy and angular momentum are those of the
two-body problem and are conserved by the exact dynamics. Their drift
measures the integrator error.
"""

from typing import Tuple

import numpy as np

from galaxy_collision.physics.gravity import G


def core_center_of_mass_velocity(velocities, core_masses) -> np.ndarray:
    """Velocity of the centre of mass of the two cores (3,)."""
    core_masses = np.asarray(core_masses, dtype=float)
    return core_masses @ np.asarray(velocities)[:2] / np.sum(core_masses)


def core_separation(positions) -> float:
    """Distance between the two cores."""
    positions = np.asarray(positions)
    return float(np.linalg.norm(positions[1] - positions[0]))


def core_energies(positions, velocities, core_masses) -> Tuple[float, float, float]:
    """Kinetic, potential and total energy of the two cores.

    Returns:
        Tuple of (kinetic_energy, potential_energy, total_energy)
    """
    core_masses = np.asarray(core_masses, dtype=float)
    velocities = np.asarray(velocities)

    # K = 0.5 * Σ m_i * v_i^2
    K = 0.5 * float(np.sum(core_masses * np.sum(velocities[:2] ** 2, axis=1)))

    # U = -G * m0 * m1 / r
    U = -G * float(core_masses[0] * core_masses[1]) / core_separation(positions)

    return K, U, K + U


def core_angular_momentum(positions, velocities, core_masses) -> np.ndarray:
    """Total angular momentum of the cores about the origin (3,)."""
    core_masses = np.asarray(core_masses, dtype=float)
    momenta = core_masses[:, np.newaxis] * np.asarray(velocities)[:2]
    return np.sum(np.cross(np.asarray(positions)[:2], momenta), axis=0)


def relative_orbit_elements(positions, velocities, core_masses) -> Tuple[float, float]:
    """Semi-major axis and eccentricity of the relative orbit of the cores.

    Uses the vis-viva equation for a and the eccentricity vector
    e = (v x h) / μ - r / |r| with μ = G (m0 + m1) and h = r x v.

    Returns:
        Tuple of (semi_major_axis, eccentricity); the semi-major axis is
        negative for an unbound orbit
    """
    positions = np.asarray(positions)
    velocities = np.asarray(velocities)
    mu = G * float(np.sum(core_masses))

    r = positions[1] - positions[0]
    v = velocities[1] - velocities[0]
    r_norm = np.linalg.norm(r)

    semi_major_axis = 1.0 / (2.0 / r_norm - np.dot(v, v) / mu)

    h = np.cross(r, v)
    eccentricity_vector = np.cross(v, h) / mu - r / r_norm

    return float(semi_major_axis), float(np.linalg.norm(eccentricity_vector))


def camera_distance(positions) -> float:
    """Largest distance of a body from the origin, used to zoom the view."""
    positions = np.asarray(positions)
    if positions.size == 0:
        return 0.0
    return float(np.max(np.linalg.norm(positions.reshape(-1, 3), axis=1)))
