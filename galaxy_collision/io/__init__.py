"""I/O utilities for state management."""

from galaxy_collision.io.state_io import save_state, load_state, load_configuration

__all__ = ["save_state", "load_state", "load_configuration"]
