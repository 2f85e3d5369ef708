"""Rendering and animation of the simulation."""

from galaxy_collision.render.renderer_3d import Renderer3D
from galaxy_collision.render.animation import Animator

__all__ = ["Renderer3D", "Animator"]
