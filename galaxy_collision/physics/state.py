"""Mutable state of a running simulation."""

from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass
class SimulationState:
    """State owned by the frame loop and passed to `set_initial`/`update`.

    The body arrays are None until `set_initial` runs (Uninitialized) and are
    mutated in place afterwards (Running). Renderers only get `snapshot()`.

    Attributes:
        time_step: Amount of simulation time per screen frame, always positive
        positions: Positions of all bodies (n, 3), cores first
        velocities: Velocities of all bodies (n, 3)
        core_masses: Masses of the two cores (2,)
        paused: If True, `update` leaves the bodies where they are
        time_direction: 1 for forward, -1 for backward in time
        fast_forward_seconds: One-shot signed time offset applied as a single
            step on the next update, then reset to zero
        time: Simulation time elapsed since `set_initial`
        step_count: Number of steps taken since `set_initial`
    """
    time_step: float = 1.0
    positions: Optional[np.ndarray] = None
    velocities: Optional[np.ndarray] = None
    core_masses: Optional[np.ndarray] = None
    paused: bool = False
    time_direction: int = 1
    fast_forward_seconds: float = 0.0
    time: float = 0.0
    step_count: int = 0

    @property
    def initialized(self) -> bool:
        return self.positions is not None

    @property
    def n_bodies(self) -> int:
        return 0 if self.positions is None else self.positions.shape[0]

    def snapshot(self, dtype=np.float64) -> np.ndarray:
        """Flat copy of the positions: x, y, z of body 0, then body 1, ...

        Returns:
            Array of length 3 * n_bodies (empty while uninitialized)
        """
        if self.positions is None:
            return np.empty(0, dtype=dtype)
        return np.array(self.positions, dtype=dtype).reshape(-1)

    def clear(self):
        """Drop the bodies so that the next frame starts from scratch."""
        self.positions = None
        self.velocities = None
        self.core_masses = None
