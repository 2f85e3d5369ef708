"""Time step calibration against the screen refresh rate."""

import math
import numbers

from galaxy_collision.exceptions import ConfigurationError

# Simulation time units per second of wall clock
TIME_UNITS_PER_SECOND = 60.0


def round_refresh_rate(screen_refresh_rate_fps: float) -> int:
    """Round a measured refresh rate to the nearest 10 FPS (at least 10)."""
    if (not isinstance(screen_refresh_rate_fps, numbers.Real)
            or isinstance(screen_refresh_rate_fps, bool)
            or not math.isfinite(screen_refresh_rate_fps)
            or screen_refresh_rate_fps <= 0):
        raise ConfigurationError(
            f"Screen refresh rate must be a positive number, got {screen_refresh_rate_fps!r}"
        )
    # Halves round up: 65 FPS becomes 70
    return max(10, math.floor(screen_refresh_rate_fps / 10 + 0.5) * 10)


def calculate_time_step(screen_refresh_rate_fps: float) -> float:
    """Simulation time advanced per screen frame.

    Higher refresh rates use smaller steps, so the simulation runs at the same
    speed on every screen. The step is 1 for a 60 FPS screen.
    """
    return TIME_UNITS_PER_SECOND / round_refresh_rate(screen_refresh_rate_fps)
