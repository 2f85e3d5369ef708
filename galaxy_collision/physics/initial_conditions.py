"""Initial positions and velocities of the two galaxy cores and their stars.

The cores move on a bound Kepler orbit around their common centre of mass in
the x-y plane and start at apastron. Stars are massless test particles placed
on circular orbits in rings around their host core. Everything here is
deterministic: identical configurations produce bit-identical arrays.
"""

import logging
import math
from typing import Tuple

import numpy as np

from galaxy_collision.exceptions import ConfigurationError
from galaxy_collision.physics.configuration import Configuration

logger = logging.getLogger(__name__)

STARS_IN_FIRST_RING = 12
EXTRA_STARS_PER_RING = 6


def number_of_stars_in_one_ring(ring_number: int) -> int:
    """Number of stars in a ring; ring 1 is the closest to the galaxy centre.

    Outer rings hold more stars.
    """
    if ring_number < 1:
        raise ConfigurationError(f"Ring numbers start at 1, got {ring_number}")
    return STARS_IN_FIRST_RING + EXTRA_STARS_PER_RING * (ring_number - 1)


def number_of_stars_in_all_rings(number_of_rings: int) -> int:
    """Total number of stars in a galaxy with `number_of_rings` rings."""
    return sum(
        number_of_stars_in_one_ring(ring_number)
        for ring_number in range(1, number_of_rings + 1)
    )


def body_count(configuration: Configuration) -> int:
    """Number of bodies: two cores plus the stars of both galaxies."""
    return 2 + sum(
        number_of_stars_in_all_rings(rings)
        for rings in configuration.rings_per_galaxy
    )


def galaxy_slices(configuration: Configuration) -> Tuple[slice, slice]:
    """Index ranges of the stars of galaxy 0 and galaxy 1 in the body list."""
    first = number_of_stars_in_all_rings(configuration.rings_per_galaxy[0])
    second = number_of_stars_in_all_rings(configuration.rings_per_galaxy[1])
    return slice(2, 2 + first), slice(2 + first, 2 + first + second)


def galaxy_stars_positions_and_velocities(
    core_position,
    core_velocity,
    core_mass: float,
    inclination: float,
    number_of_rings: int,
    ring_separation: float
) -> Tuple[np.ndarray, np.ndarray]:
    """Positions and velocities of the stars in one galaxy.

    Each star moves on a circular orbit around the core, ignoring the other
    core and the other stars. Equating centripetal acceleration v^2/r with
    gravity M/r^2 (G = 1) gives the orbital speed v = sqrt(M / r).

    A star is first placed in the galaxy's own plane, then the plane is tilted
    by `inclination` relative to the orbital plane of the cores, and finally
    the core position and velocity are added.

    Args:
        core_position: Position of the core (3,)
        core_velocity: Velocity of the core (3,)
        core_mass: Mass of the core
        inclination: Inclination of the galaxy relative to the orbital plane
            of the cores, in radians
        number_of_rings: Number of rings in the galaxy
        ring_separation: Distance between neighbouring rings

    Returns:
        Tuple of (positions, velocities), each of shape (n_stars, 3), ring 1
        first
    """
    n_stars = number_of_stars_in_all_rings(number_of_rings)
    positions = np.empty((n_stars, 3))
    velocities = np.empty((n_stars, 3))

    core_position = np.asarray(core_position, dtype=float)
    core_velocity = np.asarray(core_velocity, dtype=float)
    cos_inclination = math.cos(inclination)
    sin_inclination = math.sin(inclination)

    start = 0

    for ring_number in range(1, number_of_rings + 1):
        distance_from_center = ring_number * ring_separation
        n_ring = number_of_stars_in_one_ring(ring_number)
        star_speed = math.sqrt(core_mass / distance_from_center)

        angle_between_neighbours = 2 * math.pi / n_ring
        star_angles = np.arange(n_ring) * angle_between_neighbours
        cos_angles = np.cos(star_angles)
        sin_angles = np.sin(star_angles)

        end = start + n_ring

        # Tilt rotates the in-plane (x, y, 0) vectors about the y axis
        positions[start:end, 0] = distance_from_center * cos_angles * cos_inclination
        positions[start:end, 1] = distance_from_center * sin_angles
        positions[start:end, 2] = -distance_from_center * cos_angles * sin_inclination

        velocities[start:end, 0] = -star_speed * sin_angles * cos_inclination
        velocities[start:end, 1] = star_speed * cos_angles
        velocities[start:end, 2] = star_speed * sin_angles * sin_inclination

        start = end

    positions += core_position
    velocities += core_velocity

    return positions, velocities


def core_positions_and_velocities(configuration: Configuration) -> Tuple[np.ndarray, np.ndarray]:
    """Place the two cores at apastron in the centre-of-mass frame.

    With periastron r_min = a (1 - e) the semi-major axis is
    a = r_min / (1 - e), and the apastron separation is r = a (1 + e).
    Balancing r0 m0 = r1 m1 about the centre of mass puts core 0 at
    x = -r m1 / M and core 1 at x = r m0 / M.

    The relative speed at apastron follows from the two-body problem,
    v0 = sqrt(a (1 - e^2) M) / r, and is split between the cores so that
    their momenta cancel.

    Returns:
        Tuple of (positions, velocities), each of shape (2, 3)
    """
    m0, m1 = (float(mass) for mass in configuration.core_masses)
    e = configuration.eccentricity
    total_mass = m0 + m1

    a = configuration.minimal_galaxy_separation / (1 - e)
    r = a * (1 + e)
    v0 = math.sqrt(a * (1 - e ** 2) * total_mass) / r

    positions = np.array([
        [-r * m1 / total_mass, 0.0, 0.0],
        [r * m0 / total_mass, 0.0, 0.0]
    ])
    velocities = np.array([
        [0.0, -v0 * m1 / total_mass, 0.0],
        [0.0, v0 * m0 / total_mass, 0.0]
    ])

    return positions, velocities


def all_positions_and_velocities(configuration: Configuration) -> Tuple[np.ndarray, np.ndarray]:
    """Positions and velocities of all bodies.

    The first two rows are the cores, followed by the stars of galaxy 0 and
    then the stars of galaxy 1.

    Returns:
        Tuple of (positions, velocities), each of shape (n_bodies, 3)
    """
    core_positions, core_velocities = core_positions_and_velocities(configuration)

    n_bodies = body_count(configuration)
    positions = np.empty((n_bodies, 3))
    velocities = np.empty((n_bodies, 3))
    positions[:2] = core_positions
    velocities[:2] = core_velocities

    for galaxy_number, stars in enumerate(galaxy_slices(configuration)):
        positions[stars], velocities[stars] = galaxy_stars_positions_and_velocities(
            core_position=core_positions[galaxy_number],
            core_velocity=core_velocities[galaxy_number],
            core_mass=configuration.core_masses[galaxy_number],
            inclination=configuration.inclination_angles[galaxy_number],
            number_of_rings=configuration.rings_per_galaxy[galaxy_number],
            ring_separation=configuration.ring_separation
        )

    return positions, velocities


def generate(configuration: Configuration) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Generate the initial state for a configuration.

    Args:
        configuration: Simulation parameters

    Returns:
        Tuple of (positions, velocities, core_masses)

    Raises:
        ConfigurationError: if the configuration is invalid; nothing is
            generated in that case
    """
    configuration.validate()

    positions, velocities = all_positions_and_velocities(configuration)
    core_masses = np.array(configuration.core_masses, dtype=float)

    logger.info(
        "Generated %d bodies (rings %s, eccentricity %.3f)",
        positions.shape[0], tuple(configuration.rings_per_galaxy), configuration.eccentricity
    )

    return positions, velocities, core_masses
