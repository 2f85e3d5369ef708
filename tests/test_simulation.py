"""Tests for per-frame stepping and the simulation state."""

import numpy as np
import pytest

from galaxy_collision.exceptions import ConfigurationError, InvariantViolation, NumericDegeneracy
from galaxy_collision.physics.configuration import Configuration
from galaxy_collision.physics.diagnostics import core_energies
from galaxy_collision.physics.integrators import EulerIntegrator, VerletIntegrator
from galaxy_collision.physics.simulation import next_time_step, restart, set_initial, update
from galaxy_collision.physics.state import SimulationState
from galaxy_collision.physics.timestep import calculate_time_step, round_refresh_rate


@pytest.fixture
def configuration():
    return Configuration(rings_per_galaxy=(2, 3))


@pytest.fixture
def state(configuration):
    state = SimulationState(time_step=1.0)
    set_initial(configuration, state)
    return state


def test_set_initial(configuration):
    state = SimulationState()
    assert not state.initialized
    assert state.snapshot().size == 0

    set_initial(configuration, state)

    assert state.initialized
    assert state.n_bodies == 2 + 30 + 54
    assert state.positions.shape == (86, 3)
    assert np.array_equal(state.core_masses, [1.0, 1.0])
    assert state.time == 0.0
    assert state.step_count == 0


def test_set_initial_invalid_configuration_leaves_state_alone():
    state = SimulationState()

    with pytest.raises(ConfigurationError):
        set_initial(Configuration(eccentricity=1.0), state)

    assert not state.initialized


def test_snapshot_is_flat_copy(state):
    snapshot = state.snapshot()

    assert snapshot.shape == (3 * state.n_bodies,)
    assert np.array_equal(snapshot[:3], state.positions[0])
    assert np.array_equal(snapshot[3:6], state.positions[1])

    snapshot[:] = 0
    assert not np.all(state.positions == 0)

    assert state.snapshot(np.float32).dtype == np.float32


def test_update_moves_bodies_in_place(configuration, state):
    positions = state.positions

    assert update(configuration, state) is True

    assert state.positions is positions
    assert state.step_count == 1
    assert state.time == pytest.approx(1.0)


def test_update_matches_integrator_step(configuration, state):
    integrator = EulerIntegrator()
    expected_pos, expected_vel = integrator.step(
        state.positions, state.velocities, state.core_masses, 1.0
    )

    update(configuration, state, integrator)

    assert np.array_equal(state.positions, expected_pos)
    assert np.array_equal(state.velocities, expected_vel)


def test_update_while_paused_changes_nothing(configuration, state):
    """Positions and velocities stay byte-for-byte identical."""
    update(configuration, state)
    positions_bytes = state.positions.tobytes()
    velocities_bytes = state.velocities.tobytes()

    state.paused = True
    state.fast_forward_seconds = 5.0
    for _ in range(3):
        assert update(configuration, state) is False

    assert state.positions.tobytes() == positions_bytes
    assert state.velocities.tobytes() == velocities_bytes
    assert state.step_count == 1
    # Fast forward waits for the simulation to resume
    assert state.fast_forward_seconds == 5.0


def test_time_direction_gives_negative_step(configuration, state):
    state.time_direction = -1
    assert next_time_step(state) == -1.0

    update(configuration, state)

    assert state.time == pytest.approx(-1.0)


def test_fast_forward_is_one_shot(configuration, state):
    state.time_step = 0.5
    state.time_direction = -1
    state.fast_forward_seconds = 5.0
    assert next_time_step(state) == 5.0

    integrator = EulerIntegrator()
    expected_pos, _ = integrator.step(state.positions, state.velocities, state.core_masses, 5.0)

    update(configuration, state, integrator)

    assert np.array_equal(state.positions, expected_pos)
    assert state.fast_forward_seconds == 0.0
    assert state.time == pytest.approx(5.0)

    update(configuration, state, integrator)
    assert state.time == pytest.approx(4.5)


def test_forward_then_backward_returns_close_to_start(configuration):
    state = SimulationState(time_step=0.01)
    set_initial(configuration, state)
    start = state.positions.copy()

    update(configuration, state)
    state.time_direction = -1
    update(configuration, state)

    assert np.allclose(state.positions, start, atol=1e-4)
    assert state.time == pytest.approx(0.0)


def test_verlet_reverses_many_steps(configuration):
    state = SimulationState(time_step=1.0)
    set_initial(configuration, state)
    start_pos = state.positions.copy()
    start_vel = state.velocities.copy()
    integrator = VerletIntegrator()

    for _ in range(50):
        update(configuration, state, integrator)
    state.time_direction = -1
    for _ in range(50):
        update(configuration, state, integrator)

    assert np.allclose(state.positions, start_pos, atol=1e-8)
    assert np.allclose(state.velocities, start_vel, atol=1e-8)


def test_core_energy_stays_bounded():
    """Semi-implicit Euler keeps the core orbit energy close to its start value."""
    configuration = Configuration(rings_per_galaxy=(1, 1))
    state = SimulationState(time_step=1.0)
    set_initial(configuration, state)
    _, _, E0 = core_energies(state.positions, state.velocities, state.core_masses)

    for _ in range(3000):
        update(configuration, state)

    _, _, E = core_energies(state.positions, state.velocities, state.core_masses)
    assert abs(E - E0) / abs(E0) < 0.05


def test_update_before_set_initial(configuration):
    with pytest.raises(InvariantViolation):
        update(configuration, SimulationState())


def test_update_with_wrong_body_count(configuration, state):
    state.positions = np.vstack([state.positions, [[0.0, 0.0, 0.0]]])

    with pytest.raises(InvariantViolation):
        update(configuration, state)


def test_update_with_other_configuration(state):
    with pytest.raises(InvariantViolation):
        update(Configuration(rings_per_galaxy=(5, 5)), state)


def test_numeric_degeneracy_keeps_last_valid_state(configuration, state):
    # Star sitting exactly on core 0
    state.positions[2] = state.positions[0]
    state.fast_forward_seconds = 2.0
    positions = state.positions.copy()
    velocities = state.velocities.copy()

    with pytest.raises(NumericDegeneracy):
        update(configuration, state)

    assert np.array_equal(state.positions, positions)
    assert np.array_equal(state.velocities, velocities)
    assert state.step_count == 0
    assert state.time == 0.0
    assert state.fast_forward_seconds == 0.0


def test_restart(configuration, state):
    update(configuration, state)
    state.paused = True

    restart(state)

    assert not state.initialized
    assert state.velocities is None
    assert state.core_masses is None
    # Controls survive a restart
    assert state.paused is True

    set_initial(configuration, state)
    assert state.initialized
    assert state.step_count == 0


@pytest.mark.parametrize("fps, rounded, time_step", [
    (60.0, 60, 1.0),
    (59.94, 60, 1.0),
    (144.2, 140, 60 / 140),
    (120.0, 120, 0.5),
    (65.0, 70, 60 / 70),
    (3.0, 10, 6.0),
])
def test_calculate_time_step(fps, rounded, time_step):
    assert round_refresh_rate(fps) == rounded
    assert calculate_time_step(fps) == pytest.approx(time_step)


@pytest.mark.parametrize("fps", [0.0, -60.0, float('nan'), float('inf')])
def test_calculate_time_step_rejects_bad_rate(fps):
    with pytest.raises(ConfigurationError):
        calculate_time_step(fps)


def test_update_with_list_positions(configuration, state):
    state.positions = state.positions.tolist()

    with pytest.raises(InvariantViolation):
        update(configuration, state)


def test_update_without_velocities(configuration, state):
    state.velocities = None

    with pytest.raises(InvariantViolation):
        update(configuration, state)
