"""Basic example of using the galaxy collision simulator."""

from galaxy_collision import Configuration, Simulator
from galaxy_collision.physics.commands import FastForward, ReverseTime
from galaxy_collision.physics.diagnostics import core_energies, core_separation


def core_energy(sim):
    state = sim.state
    return core_energies(state.positions, state.velocities, state.core_masses)[2]


def main():
    """Run a collision forward, then rewind it."""
    configuration = Configuration.from_degrees(
        (60.0, 30.0),
        rings_per_galaxy=(5, 4),
        core_masses=(1.0, 0.7),
        eccentricity=0.6
    )
    sim = Simulator(configuration)
    sim.set_initial()

    print(f"Bodies: {sim.state.n_bodies}")
    print(f"Initial core energy: {core_energy(sim):.6f}")

    for step in range(1500):
        sim.update()
        if step % 300 == 0:
            separation = core_separation(sim.state.positions)
            print(f"Step {step}: Time={sim.time:.1f}, Separation={separation:.2f}, Energy={core_energy(sim):.6f}")

    # Jump back a little, then run backwards in time
    sim.dispatch(FastForward(-5))
    sim.update()
    sim.dispatch(ReverseTime())
    for _ in range(500):
        sim.update()

    print(f"Time after rewinding: {sim.time:.1f}")
    print(f"Final core energy: {core_energy(sim):.6f}")
    print("Simulation complete!")


if __name__ == "__main__":
    main()
