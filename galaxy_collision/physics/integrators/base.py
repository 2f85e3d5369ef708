"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np


class Integrator(ABC):
    """Abstract interface for numerical integrators."""

    @abstractmethod
    def step(
        self,
        positions: np.ndarray,
        velocities: np.ndarray,
        core_masses: np.ndarray,
        dt: float
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Perform one integration step.

        The input arrays are not modified.

        Args:
            positions: Current positions (n, 3), cores first
            velocities: Current velocities (n, 3)
            core_masses: Masses of the two cores (2,)
            dt: Signed time step; negative values integrate backwards

        Returns:
            Tuple of (new_positions, new_velocities)
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy (1 for Euler, 2 for Verlet)."""
        pass
