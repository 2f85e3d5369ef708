"""3D renderer using matplotlib."""

from typing import Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from galaxy_collision.physics.diagnostics import camera_distance

DEFAULT_COLORS = ((255, 127, 0), (0, 100, 255))


class Renderer3D:
    """Draws one frame snapshot of the bodies as a 3D scatter plot.

    The renderer only sees the flat (x, y, z, ...) snapshot of the current
    frame and never keeps it between frames.
    """

    def __init__(
        self,
        galaxy_slices: Tuple[slice, slice],
        colors: Sequence[Sequence[int]] = DEFAULT_COLORS,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        elevation: float = 30.0,
        azimuth: float = -60.0,
        star_size: float = 4.0,
        core_size: float = 40.0
    ):
        """Initialize 3D renderer.

        Args:
            galaxy_slices: Index ranges of the stars of each galaxy
            colors: RGB colours (0-255) of the stars of galaxy 0 and galaxy 1
            figsize: Figure size
            dpi: Dots per inch
            elevation: Camera elevation angle
            azimuth: Camera azimuth angle
            star_size: Marker size of the stars
            core_size: Marker size of the cores
        """
        self.figsize = figsize
        self.dpi = dpi
        self.elevation = elevation
        self.azimuth = azimuth
        self.star_size = star_size
        self.core_size = core_size
        self.fig: Optional[Figure] = None
        self.ax = None
        self.scatter = None
        self.reset(galaxy_slices, colors)

    def reset(self, galaxy_slices: Tuple[slice, slice], colors: Optional[Sequence[Sequence[int]]] = None):
        """Prepare for a new body list, e.g. after a restart."""
        if colors is not None:
            self.colors = np.asarray(colors, dtype=float) / 255.0
        self.galaxy_slices = galaxy_slices
        self.n_bodies = galaxy_slices[1].stop
        self._body_colors = self._make_body_colors()
        self._sizes = np.full(self.n_bodies, self.star_size)
        self._sizes[:2] = self.core_size

        if self.scatter is not None:
            self.scatter.remove()
            self.scatter = None

    def _make_body_colors(self) -> np.ndarray:
        body_colors = np.ones((self.n_bodies, 3))
        for galaxy_number, stars in enumerate(self.galaxy_slices):
            body_colors[stars] = self.colors[galaxy_number]
            body_colors[galaxy_number] = self.colors[galaxy_number]
        return body_colors

    def _initialize(self, positions: np.ndarray):
        """Create the figure and zoom to the initial extent of the bodies."""
        if self.fig is None:
            self.fig = plt.figure(figsize=self.figsize, dpi=self.dpi)
            self.ax = self.fig.add_subplot(111, projection='3d')
            self.fig.patch.set_facecolor('black')
            self.ax.set_facecolor('black')
            self.ax.set_axis_off()
            self.ax.view_init(elev=self.elevation, azim=self.azimuth)

        if self.scatter is None:
            limit = camera_distance(positions) * 1.1 or 1.0
            self.ax.set_xlim(-limit, limit)
            self.ax.set_ylim(-limit, limit)
            self.ax.set_zlim(-limit, limit)
            self.scatter = self.ax.scatter(
                positions[:, 0], positions[:, 1], positions[:, 2],
                c=self._body_colors, s=self._sizes,
                depthshade=False, edgecolors='none'
            )

    def render(self, snapshot: np.ndarray):
        """Render current frame.

        Args:
            snapshot: Flat positions of all bodies, length 3 * n_bodies
        """
        positions = np.asarray(snapshot, dtype=float).reshape(-1, 3)
        if positions.shape[0] != self.n_bodies:
            raise ValueError(
                f"Snapshot has {positions.shape[0]} bodies, renderer expects {self.n_bodies}"
            )

        if self.scatter is None:
            self._initialize(positions)
        else:
            self.scatter._offsets3d = (positions[:, 0], positions[:, 1], positions[:, 2])

        return self.scatter

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array (H, W, 3) uint8."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")

        self.fig.canvas.draw()
        return np.asarray(self.fig.canvas.buffer_rgba())[:, :, :3].copy()

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.scatter = None
