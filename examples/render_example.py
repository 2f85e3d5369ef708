"""Example with real-time rendering."""

from galaxy_collision import Simulator
from galaxy_collision.physics.integrators import VerletIntegrator
from galaxy_collision.physics.timestep import calculate_time_step
from galaxy_collision.render import Animator
from galaxy_collision.render.animation import KEY_HELP
from galaxy_collision.utils.config import Config


def main():
    """Show two galaxies colliding in a 3D window."""
    config = Config(
        rings_per_galaxy=[6, 6],
        minimal_galaxy_separation=20.0,
        inclination_angles_degrees=[45.0, -30.0],
        core_masses=[1.0, 1.0],
        eccentricity=0.5
    )

    sim = Simulator(
        config.to_configuration(),
        VerletIntegrator(),
        time_step=calculate_time_step(config.screen_refresh_rate_fps)
    )

    print(f"Controls: {KEY_HELP}")
    Animator(sim, colors=config.colors).run()


if __name__ == "__main__":
    main()
