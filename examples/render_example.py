"""Render the default scenario with trails and save it as a GIF."""

from orbital_sim import Simulator
from orbital_sim.io import GIFExporter
from orbital_sim.render import Renderer2D


def main():
    sim = Simulator()
    renderer = Renderer2D(show_trails=True, trail_length=300, interactive=False)
    exporter = GIFExporter("solar_system.gif", renderer=renderer, fps=20)
    
    sim.resume()
    sim.set_time_multiplier(10.0)
    for step in range(600):
        state = sim.step()
        if step % 10 == 0:
            exporter.record(state)
    
    renderer.close()
    exporter.export()
    print(f"Saved {len(exporter.frames)} frames to {exporter.output_path}")


if __name__ == "__main__":
    main()
