"""CLI main entry point."""

import argparse
import logging
import sys
from dataclasses import replace

from galaxy_collision.exceptions import ConfigurationError, NumericDegeneracy
from galaxy_collision.io.state_io import save_state
from galaxy_collision.physics.commands import FastForward, ReverseTime
from galaxy_collision.physics.diagnostics import (
    core_angular_momentum, core_energies, core_separation
)
from galaxy_collision.physics.integrators import INTEGRATORS
from galaxy_collision.physics.simulator import Simulator
from galaxy_collision.utils.config import Config, load_config, save_config


def build_config(args) -> Config:
    """Config from the --config file (or defaults) overridden by flags."""
    config = load_config(args.config) if args.config else Config()

    overrides = {
        'rings_per_galaxy': args.rings,
        'ring_separation': args.ring_separation,
        'minimal_galaxy_separation': args.min_separation,
        'inclination_angles_degrees': args.inclination,
        'core_masses': args.masses,
        'eccentricity': args.eccentricity,
        'integrator': args.integrator,
        'screen_refresh_rate_fps': args.fps,
        'steps': args.steps,
        'save_state': args.save_state,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if args.render:
        overrides['render'] = True

    return replace(config, **overrides)


def print_row(sim: Simulator, E0: float):
    state = sim.state
    K, U, E = core_energies(state.positions, state.velocities, state.core_masses)
    Lz = core_angular_momentum(state.positions, state.velocities, state.core_masses)[2]
    dE = (E - E0) / abs(E0) * 100 if E0 else 0.0
    separation = core_separation(state.positions)
    print(f"{state.step_count:<8} {state.time:<10.2f} {E:<12.5f} {dE:<10.4f}% {Lz:<12.5f} {separation:<10.3f}")


def run_simulation(config: Config, args) -> int:
    """Run a headless simulation and print core diagnostics."""
    if not isinstance(config.steps, int) or isinstance(config.steps, bool) or config.steps < 0:
        raise ConfigurationError(f"steps must be a non-negative integer, got {config.steps!r}")

    sim = Simulator.from_config(config)
    sim.set_initial()

    if args.reverse:
        sim.dispatch(ReverseTime())
    if args.fast_forward:
        sim.dispatch(FastForward(args.fast_forward))

    state = sim.state
    print(f"Running simulation: {state.n_bodies} bodies, eccentricity {config.eccentricity}")
    print(f"Integrator: {sim.integrator.name}, time step: {state.time_step:.4f}, direction: {state.time_direction:+d}")

    _, _, E0 = core_energies(state.positions, state.velocities, state.core_masses)

    print(f"{'Step':<8} {'Time':<10} {'E':<12} {'dE/E0':<11} {'Lz':<12} {'Separation':<10}")
    print("-" * 68)
    print_row(sim, E0)

    exit_code = 0
    for _ in range(config.steps):
        try:
            sim.update()
        except NumericDegeneracy as e:
            print(f"Stopped: {e}")
            exit_code = 1
            break

        if state.step_count % args.debug_every == 0:
            print_row(sim, E0)

    if config.save_state:
        save_state(state, config.save_state, configuration=sim.configuration, metadata={
            'integrator': sim.integrator.name
        })
        print(f"State saved to {config.save_state}")

    print("Simulation complete!")
    return exit_code


def run_animation(config: Config):
    """Open the real-time 3D view."""
    from galaxy_collision.render.animation import Animator, KEY_HELP

    sim = Simulator.from_config(config)
    print(f"Controls: {KEY_HELP}")
    Animator(sim, colors=config.colors, screen_refresh_rate_fps=config.screen_refresh_rate_fps).run()
    return 0


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Galaxy Collision - two colliding galaxies")

    parser.add_argument('--config', type=str, default=None,
                        help='Config file (.json or .yaml); flags override its values')

    # Galaxy parameters
    parser.add_argument('--rings', type=int, nargs=2, default=None, metavar=('N0', 'N1'),
                        help='Number of star rings in each galaxy (default: 5 5)')
    parser.add_argument('--ring-separation', type=float, default=None,
                        help='Distance between neighbouring rings (default: 3)')
    parser.add_argument('--min-separation', type=float, default=None,
                        help='Closest approach of the two cores (default: 25)')
    parser.add_argument('--inclination', type=float, nargs=2, default=None, metavar=('DEG0', 'DEG1'),
                        help='Inclination of each galaxy in degrees (default: 60 60)')
    parser.add_argument('--masses', type=float, nargs=2, default=None, metavar=('M0', 'M1'),
                        help='Masses of the two cores (default: 1 1)')
    parser.add_argument('--eccentricity', type=float, default=None,
                        help='Eccentricity of the core orbit, in [0, 1) (default: 0.6)')

    # Simulation
    parser.add_argument('--integrator', type=str, default=None,
                        choices=sorted(INTEGRATORS.keys()),
                        help='Numerical integrator (default: euler)')
    parser.add_argument('--fps', type=float, default=None,
                        help='Screen refresh rate used to calibrate the time step (default: 60)')
    parser.add_argument('--steps', type=int, default=None,
                        help='Number of frames to simulate (default: 1000)')
    parser.add_argument('--debug-every', type=int, default=100,
                        help='Print diagnostics every N steps')
    parser.add_argument('--reverse', action='store_true',
                        help='Run backwards in time')
    parser.add_argument('--fast-forward', type=float, default=0.0,
                        help='Jump by this much simulation time on the first step (negative rewinds)')

    # Rendering
    parser.add_argument('--render', action='store_true',
                        help='Show the real-time 3D animation')

    # Export
    parser.add_argument('--save-state', type=str, default=None,
                        help='Save final state to file (.npz or .json)')
    parser.add_argument('--save-config', type=str, default=None,
                        help='Write the effective config to file and exit')

    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    return parser


def main(argv=None) -> int:
    """CLI entry point."""
    args = make_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.debug_every < 1:
        print("--debug-every must be at least 1")
        return 1

    try:
        config = build_config(args)

        if args.save_config:
            config.to_configuration()
            save_config(config, args.save_config)
            print(f"Config saved to {args.save_config}")
            return 0

        if config.render:
            return run_animation(config)
        return run_simulation(config, args)

    except ConfigurationError as e:
        print(f"Invalid configuration: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
