"""Tests for I/O functionality."""

import numpy as np
import pytest

from galaxy_collision.exceptions import InvariantViolation
from galaxy_collision.io.state_io import load_configuration, load_state, save_state
from galaxy_collision.physics.configuration import Configuration
from galaxy_collision.physics.simulation import set_initial, update
from galaxy_collision.physics.state import SimulationState


@pytest.fixture
def configuration():
    return Configuration(rings_per_galaxy=(1, 2), core_masses=(1.0, 0.5))


@pytest.fixture
def state(configuration):
    state = SimulationState(time_step=0.5)
    set_initial(configuration, state)
    for _ in range(3):
        update(configuration, state)
    return state


@pytest.mark.parametrize("suffix", [".npz", ".json"])
def test_save_load_state(tmp_path, configuration, state, suffix):
    path = tmp_path / f"state{suffix}"

    save_state(state, str(path), configuration=configuration, metadata={"integrator": "euler"})
    positions, velocities, core_masses, metadata = load_state(str(path))

    assert np.allclose(positions, state.positions)
    assert np.allclose(velocities, state.velocities)
    assert np.allclose(core_masses, [1.0, 0.5])
    assert metadata["time"] == pytest.approx(1.5)
    assert metadata["steps"] == 3
    assert metadata["integrator"] == "euler"
    assert load_configuration(metadata) == configuration


def test_load_configuration_missing():
    assert load_configuration({"time": 1.0}) is None


def test_save_uninitialized_state(tmp_path):
    with pytest.raises(InvariantViolation):
        save_state(SimulationState(), str(tmp_path / "state.npz"))


def test_unsupported_format(tmp_path, state):
    with pytest.raises(ValueError):
        save_state(state, str(tmp_path / "state.csv"))
    with pytest.raises(ValueError):
        load_state(str(tmp_path / "state.csv"))
