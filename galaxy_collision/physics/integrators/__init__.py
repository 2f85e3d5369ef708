"""Numerical integrators for the galaxy collision."""

from galaxy_collision.exceptions import ConfigurationError
from galaxy_collision.physics.integrators.base import Integrator
from galaxy_collision.physics.integrators.euler import EulerIntegrator
from galaxy_collision.physics.integrators.verlet import VerletIntegrator

INTEGRATORS = {
    'euler': EulerIntegrator,
    'verlet': VerletIntegrator,
}


def get_integrator(name: str) -> Integrator:
    """Get integrator by name."""
    integrator_class = INTEGRATORS.get(name.lower()) if isinstance(name, str) else None
    if integrator_class is None:
        raise ConfigurationError(f"Unknown integrator: {name}. Available: {list(INTEGRATORS.keys())}")
    return integrator_class()


__all__ = ["Integrator", "EulerIntegrator", "VerletIntegrator", "INTEGRATORS", "get_integrator"]
