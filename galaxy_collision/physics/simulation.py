"""Per-frame stepping of the galaxy collision.

The frame loop calls `set_initial` once, then `update` on every frame,
passing the same `SimulationState` back in. `restart` returns the state to
the uninitialized stage so the next frame regenerates the bodies.
"""

import logging
from typing import Optional

import numpy as np

from galaxy_collision.exceptions import InvariantViolation, NumericDegeneracy
from galaxy_collision.physics.configuration import Configuration
from galaxy_collision.physics.initial_conditions import body_count, generate
from galaxy_collision.physics.integrators.base import Integrator
from galaxy_collision.physics.integrators.euler import EulerIntegrator
from galaxy_collision.physics.state import SimulationState

logger = logging.getLogger(__name__)


def set_initial(configuration: Configuration, state: SimulationState):
    """Calculate initial positions and velocities of all bodies.

    Raises:
        ConfigurationError: if the configuration is invalid; the state is
            left unchanged
    """
    positions, velocities, core_masses = generate(configuration)

    state.positions = positions
    state.velocities = velocities
    state.core_masses = core_masses
    state.time = 0.0
    state.step_count = 0


def restart(state: SimulationState):
    """Forget the bodies; the next frame calls `set_initial` again."""
    state.clear()
    logger.info("Simulation restarted")


def _check_state(configuration: Configuration, state: SimulationState):
    if not state.initialized:
        raise InvariantViolation("update() called before set_initial()")

    expected = body_count(configuration)
    # Updated in place below
    if not (isinstance(state.positions, np.ndarray) and isinstance(state.velocities, np.ndarray)):
        raise InvariantViolation(
            f"Positions and velocities must be numpy arrays, got "
            f"{type(state.positions).__name__} and {type(state.velocities).__name__}"
        )

    positions_shape = np.shape(state.positions)
    velocities_shape = np.shape(state.velocities)

    if positions_shape != (expected, 3) or velocities_shape != (expected, 3):
        raise InvariantViolation(
            f"Expected {expected} bodies with 3 coordinates, got positions "
            f"{positions_shape} and velocities {velocities_shape}"
        )

    if state.core_masses is None or np.shape(state.core_masses) != (2,):
        raise InvariantViolation("State must carry the masses of exactly two cores")


def next_time_step(state: SimulationState) -> float:
    """Signed time step of the next update (fast forward takes precedence)."""
    if state.fast_forward_seconds:
        return state.fast_forward_seconds
    return state.time_step * state.time_direction


def update(
    configuration: Configuration,
    state: SimulationState,
    integrator: Optional[Integrator] = None
) -> bool:
    """Advance the bodies by one frame.

    Args:
        configuration: Configuration the state was generated from
        state: Current state, updated in place
        integrator: Integrator to use (default: semi-implicit Euler)

    Returns:
        True if the bodies moved, False when paused

    Raises:
        InvariantViolation: if the state was not produced by `set_initial`
            for this configuration
        NumericDegeneracy: if the step produced non-finite values; the state
            keeps its previous positions and velocities
    """
    _check_state(configuration, state)

    if state.paused:
        return False

    integrator = integrator or EulerIntegrator()
    dt = next_time_step(state)

    new_positions, new_velocities = integrator.step(
        state.positions, state.velocities, state.core_masses, dt
    )

    if not (np.all(np.isfinite(new_positions)) and np.all(np.isfinite(new_velocities))):
        bad = np.flatnonzero(
            ~(np.isfinite(new_positions).all(axis=1) & np.isfinite(new_velocities).all(axis=1))
        )
        logger.warning(
            "Non-finite state after step %d (dt=%g), bodies %s; keeping last valid state",
            state.step_count, dt, bad[:10].tolist()
        )
        # The fast forward request is used up even when it fails
        state.fast_forward_seconds = 0.0
        raise NumericDegeneracy(
            f"Step {state.step_count} produced non-finite values for {bad.size} bodies"
        )

    state.positions[...] = new_positions
    state.velocities[...] = new_velocities
    state.fast_forward_seconds = 0.0
    state.time += dt
    state.step_count += 1

    return True
