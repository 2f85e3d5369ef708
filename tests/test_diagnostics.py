"""Tests for core orbit diagnostics."""

import numpy as np
import pytest

from galaxy_collision.physics.configuration import Configuration
from galaxy_collision.physics.diagnostics import (
    camera_distance,
    core_angular_momentum,
    core_center_of_mass_velocity,
    core_energies,
    core_separation,
    relative_orbit_elements,
)
from galaxy_collision.physics.initial_conditions import generate


def test_core_energies():
    positions = np.array([[-1.0, 0.0, 0.0], [1.0, 0.0, 0.0], [5.0, 5.0, 5.0]])
    velocities = np.array([[0.0, -1.0, 0.0], [0.0, 2.0, 0.0], [9.0, 9.0, 9.0]])
    core_masses = np.array([2.0, 1.0])

    K, U, E = core_energies(positions, velocities, core_masses)

    # Stars carry no mass and do not contribute
    assert K == pytest.approx(0.5 * 2.0 * 1.0 + 0.5 * 1.0 * 4.0)
    assert U == pytest.approx(-2.0 / 2.0)
    assert E == pytest.approx(K + U)


def test_core_angular_momentum_and_separation():
    positions = np.array([[-1.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
    velocities = np.array([[0.0, -1.0, 0.0], [0.0, 1.0, 0.0]])
    core_masses = np.array([1.0, 1.0])

    assert np.allclose(core_angular_momentum(positions, velocities, core_masses), [0, 0, 2.0])
    assert core_separation(positions) == pytest.approx(2.0)


def test_generated_orbit_is_bound():
    configuration = Configuration(core_masses=(1.0, 0.7), eccentricity=0.3)
    positions, velocities, core_masses = generate(configuration)

    _, _, E = core_energies(positions, velocities, core_masses)
    a, e = relative_orbit_elements(positions, velocities, core_masses)

    assert E < 0
    # E = -G m0 m1 / (2a)
    assert E == pytest.approx(-0.7 / (2 * a))
    assert e == pytest.approx(0.3)
    assert np.allclose(core_center_of_mass_velocity(velocities, core_masses), 0, atol=1e-15)


def test_unbound_orbit_has_negative_semi_major_axis():
    positions = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
    velocities = np.array([[0.0, 0.0, 0.0], [0.0, 3.0, 0.0]])

    a, e = relative_orbit_elements(positions, velocities, [1.0, 1.0])

    assert a < 0
    assert e > 1


def test_camera_distance():
    snapshot = np.array([0.0, 0.0, 0.0, 3.0, 4.0, 0.0, -1.0, 0.0, 0.0])

    assert camera_distance(snapshot) == pytest.approx(5.0)
    assert camera_distance(np.empty(0)) == 0.0
