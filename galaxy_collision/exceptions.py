"""Exception hierarchy for the galaxy collision kernel."""


class GalaxyCollisionError(Exception):
    """Base class for all errors raised by galaxy_collision."""


class ConfigurationError(GalaxyCollisionError, ValueError):
    """Invalid simulation configuration (masses, rings, eccentricity, ...)."""


class InvariantViolation(GalaxyCollisionError, RuntimeError):
    """State object that was not produced by this kernel's generator."""


class NumericDegeneracy(GalaxyCollisionError, ArithmeticError):
    """A step produced non-finite positions or velocities.

    The offending step is discarded; the last valid state is left intact.
    """
