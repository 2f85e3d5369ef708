"""Real-time animation loop driving the simulator and the renderer."""

import logging
from typing import Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from galaxy_collision.exceptions import NumericDegeneracy
from galaxy_collision.physics.commands import (
    FAST_FORWARD_SECONDS, FastForward, Pause, Restart, Resume, ReverseTime
)
from galaxy_collision.physics.initial_conditions import galaxy_slices
from galaxy_collision.physics.simulator import Simulator
from galaxy_collision.render.renderer_3d import DEFAULT_COLORS, Renderer3D

logger = logging.getLogger(__name__)

KEY_HELP = (
    "space: pause/resume, r: reverse time, "
    "right/left: fast forward/rewind, n: restart"
)


def _release_default_keys():
    """Remove our control keys from matplotlib's navigation shortcuts."""
    ours = {' ', 'r', 'n', 'left', 'right'}
    for name in ('keymap.home', 'keymap.back', 'keymap.forward'):
        plt.rcParams[name] = [key for key in plt.rcParams[name] if key not in ours]


class Animator:
    """Calls the simulator once per frame and draws the result.

    Key presses on the figure are translated into control commands.
    """

    def __init__(
        self,
        simulator: Simulator,
        colors: Sequence[Sequence[int]] = DEFAULT_COLORS,
        screen_refresh_rate_fps: float = 60.0,
        renderer: Optional[Renderer3D] = None
    ):
        self.simulator = simulator
        self.colors = colors
        self.interval_ms = 1000.0 / screen_refresh_rate_fps
        self.renderer = renderer or Renderer3D(galaxy_slices(simulator.configuration), colors)
        self.animation: Optional[FuncAnimation] = None

    def command_for_key(self, key: str):
        """Control command bound to a key, or None."""
        if key == ' ':
            return Resume() if self.simulator.state.paused else Pause()
        if key == 'r':
            return ReverseTime()
        if key == 'right':
            return FastForward(FAST_FORWARD_SECONDS)
        if key == 'left':
            return FastForward(-FAST_FORWARD_SECONDS)
        if key == 'n':
            return Restart()
        return None

    def handle_key(self, key: str):
        command = self.command_for_key(key)
        if command is None:
            return
        self.simulator.dispatch(command)
        if isinstance(command, Restart):
            self.renderer.reset(galaxy_slices(self.simulator.configuration))

    def _on_key(self, event):
        self.handle_key(event.key)

    def step(self, frame_number: int = 0):
        """Advance the simulation one frame and draw it."""
        try:
            self.simulator.update()
        except NumericDegeneracy as e:
            logger.warning("%s; pausing simulation", e)
            self.simulator.dispatch(Pause())

        return (self.renderer.render(self.simulator.snapshot()),)

    def run(self, frames: Optional[int] = None):
        """Open the window and animate until it is closed.

        Args:
            frames: Number of frames to show (default: run forever)
        """
        _release_default_keys()
        self.step()
        self.renderer.fig.canvas.mpl_connect('key_press_event', self._on_key)
        self.renderer.ax.set_title(KEY_HELP, color='white', fontsize=8)

        self.animation = FuncAnimation(
            self.renderer.fig,
            self.step,
            init_func=lambda: (self.renderer.scatter,),
            frames=frames,
            interval=self.interval_ms,
            blit=False,
            cache_frame_data=False
        )
        plt.show()
