"""Parameters of one simulation run."""

import math
import numbers
from dataclasses import dataclass
from typing import Tuple

from galaxy_collision.exceptions import ConfigurationError


@dataclass(frozen=True)
class Configuration:
    """Initial parameters of the simulation.

    They can't be changed while the simulation runs; a new configuration is
    supplied on restart.

    Attributes:
        rings_per_galaxy: Number of star rings in galaxy 0 and galaxy 1
        ring_separation: Radial distance between neighbouring rings
        minimal_galaxy_separation: Periastron distance between the two cores
        inclination_angles: Tilt of each galaxy disk relative to the orbital
            plane of the cores, in radians
        core_masses: Masses of the two galaxy cores
        eccentricity: Eccentricity of the relative orbit of the cores, [0, 1)
    """
    rings_per_galaxy: Tuple[int, int] = (5, 5)
    ring_separation: float = 3.0
    minimal_galaxy_separation: float = 25.0
    inclination_angles: Tuple[float, float] = (math.radians(60), math.radians(60))
    core_masses: Tuple[float, float] = (1.0, 1.0)
    eccentricity: float = 0.6

    @classmethod
    def from_degrees(
        cls,
        inclination_angles_degrees: Tuple[float, float] = (60.0, 60.0),
        **kwargs
    ) -> "Configuration":
        """Create configuration with inclination angles given in degrees."""
        angles = tuple(math.radians(angle) for angle in inclination_angles_degrees)
        return cls(inclination_angles=angles, **kwargs)

    @property
    def inclination_angles_degrees(self) -> Tuple[float, float]:
        return tuple(math.degrees(angle) for angle in self.inclination_angles)

    def validate(self) -> "Configuration":
        """Check that the configuration describes a bound two-galaxy system.

        Returns:
            self, to allow chaining

        Raises:
            ConfigurationError: if any parameter is outside its domain
        """
        _check_pair("rings_per_galaxy", self.rings_per_galaxy)
        for rings in self.rings_per_galaxy:
            if isinstance(rings, bool) or not isinstance(rings, numbers.Integral) or rings < 1:
                raise ConfigurationError(
                    f"rings_per_galaxy must contain positive integers, got {self.rings_per_galaxy}"
                )

        _check_positive("ring_separation", self.ring_separation)
        _check_positive("minimal_galaxy_separation", self.minimal_galaxy_separation)

        _check_pair("core_masses", self.core_masses)
        for mass in self.core_masses:
            _check_positive("core_masses", mass)

        _check_pair("inclination_angles", self.inclination_angles)
        for angle in self.inclination_angles:
            if not _is_finite_number(angle):
                raise ConfigurationError(
                    f"inclination_angles must be finite numbers, got {self.inclination_angles}"
                )

        # e = 1 is a parabolic (unbound) orbit, e > 1 hyperbolic
        if not _is_finite_number(self.eccentricity) or not 0 <= self.eccentricity < 1:
            raise ConfigurationError(
                f"eccentricity must be in [0, 1), got {self.eccentricity}"
            )

        return self


def _is_finite_number(value) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def _check_positive(name: str, value):
    if not _is_finite_number(value) or value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value!r}")


def _check_pair(name: str, values):
    try:
        count = len(values)
    except TypeError:
        raise ConfigurationError(f"{name} must contain two values, got {values!r}") from None
    if count != 2:
        raise ConfigurationError(f"{name} must contain two values, got {values!r}")
