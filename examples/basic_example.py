"""Basic example of driving the orbital simulator step by step."""

from orbital_sim import Simulator


def main():
    """Run the default solar system for a few hundred steps."""
    sim = Simulator()
    
    K, U, E0 = sim.get_energy()
    print("Running simulation...")
    print(f"Initial energy: {E0:.6f}")
    
    sim.resume()
    for step in range(500):
        state = sim.step()
        if step % 100 == 0:
            _, _, energy = sim.get_energy()
            print(f"Step {step}: Time={state.elapsed_time:.2f}, Energy={energy:.6f}")
    
    print(f"Final energy: {sim.get_energy()[2]:.6f}")
    print("Simulation complete!")


if __name__ == "__main__":
    main()
