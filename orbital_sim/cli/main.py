"""CLI main entry point."""

import argparse
import numpy as np
from orbital_sim.physics.simulator import Simulator
from orbital_sim.presets import list_presets
from orbital_sim.io.gif_exporter import GIFExporter
from orbital_sim.io.state_io import save_state
from orbital_sim.utils.config import Config, load_config


def build_config(args) -> Config:
    """Merge a config file (if any) with explicit command-line overrides."""
    config = load_config(args.config) if args.config else Config()
    
    overrides = {
        'preset': args.preset,
        'steps': args.steps,
        'time_step': args.dt,
        'time_multiplier': args.multiplier,
        'gravity_constant': args.gravity,
        'force_method': args.force_method,
        'restitution': args.restitution,
        'debug_every': args.debug_every,
        'render_every': args.render_every,
        'fps': args.fps,
        'output_path': args.output,
        'save_state': args.save_state,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)
    
    if args.render:
        config.render = True
    if args.trails:
        config.show_trails = True
    if args.export_gif:
        config.export_gif = True
    return config


def print_diagnostics(sim: Simulator, step: int, E0: float):
    K, U, E = sim.get_energy()
    p = float(np.linalg.norm(sim.get_momentum()))
    Lz = sim.get_angular_momentum()
    dE = (E - E0) / abs(E0) * 100 if abs(E0) > 0 else 0.0
    print(f"{step:<8} {sim.time:<10.2f} {K:<12.2f} {U:<12.2f} {E:<12.2f} {p:<12.4f} {Lz:<14.2f} {dE:<10.4f}%")


def run_simulation(config: Config):
    """Run a simulation."""
    sim = Simulator.from_config(config)
    
    renderer = None
    if config.render or config.export_gif:
        from orbital_sim.render.renderer_2d import Renderer2D
        renderer = Renderer2D(show_trails=config.show_trails, interactive=config.render)
    
    gif_exporter = None
    if config.export_gif:
        gif_exporter = GIFExporter(config.output_path + ".gif", renderer=renderer, fps=config.fps)
    
    state = sim.get_state()
    print(f"Running simulation: {config.preset} with {len(state.bodies)} bodies")
    print(f"Integrator: {sim.integrator.name}, forces: {sim.force_calculator.method}, "
          f"dt: {state.time_step}, multiplier: {state.time_multiplier}, G: {state.gravity_constant}")
    
    _, _, E0 = sim.get_energy()
    print(f"{'Step':<8} {'Time':<10} {'K':<12} {'U':<12} {'E':<12} {'|p|':<12} {'Lz':<14} {'dE/E0':<10}")
    print("-" * 96)
    print_diagnostics(sim, 0, E0)
    
    sim.resume()
    for step in range(1, config.steps + 1):
        state = sim.step()
        
        if renderer and step % config.render_every == 0:
            if gif_exporter:
                gif_exporter.record(state)
            else:
                renderer.render(state)
        
        if config.debug_every > 0 and step % config.debug_every == 0:
            print_diagnostics(sim, step, E0)
    sim.pause()
    
    if gif_exporter:
        print(f"Exporting GIF to {gif_exporter.output_path}...")
        gif_exporter.export()
    
    if config.save_state:
        save_state(sim.get_state(), config.save_state, metadata={
            'steps': sim.step_count,
            'preset': config.preset,
            'integrator': sim.integrator.name,
        })
        print(f"State saved to {config.save_state}")
    
    if renderer:
        renderer.close()
    
    print("Simulation complete!")
    return sim


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Orbital Simulator - 2D N-body simulation with collisions")
    
    parser.add_argument('--config', type=str, default=None,
                       help='Load settings from a .yaml/.yml/.json file (flags override it)')
    
    # Simulation parameters
    parser.add_argument('--preset', type=str, default=None, choices=list_presets(),
                       help='Preset scenario (default: solar_system)')
    parser.add_argument('--steps', type=int, default=None,
                       help='Number of simulation steps (default: 1000)')
    parser.add_argument('--dt', type=float, default=None,
                       help='Base time step (default: 0.01)')
    parser.add_argument('--multiplier', type=float, default=None,
                       help='Time multiplier applied to dt (default: 1.0; zero or negative accepted)')
    parser.add_argument('--gravity', type=float, default=None,
                       help='Gravitational constant G (default: 0.66743)')
    parser.add_argument('--force-method', type=str, default=None, choices=['vectorized', 'direct'],
                       help='Force evaluation path')
    parser.add_argument('--restitution', type=float, default=None,
                       help='Collision restitution coefficient (default: 0.7)')
    parser.add_argument('--debug-every', type=int, default=None,
                       help='Print diagnostics every N steps (0 disables)')
    
    # Rendering
    parser.add_argument('--render', action='store_true',
                       help='Enable real-time rendering')
    parser.add_argument('--trails', action='store_true',
                       help='Show body trails')
    parser.add_argument('--render-every', type=int, default=None,
                       help='Render every N steps')
    
    # Export
    parser.add_argument('--export-gif', action='store_true',
                       help='Export to animated GIF')
    parser.add_argument('--fps', type=int, default=None,
                       help='Frames per second for export')
    parser.add_argument('--output', type=str, default=None,
                       help='Output file base name')
    parser.add_argument('--save-state', type=str, default=None,
                       help='Save final state to file (.json or .npz)')
    
    parser.add_argument('--list-presets', action='store_true',
                       help='List available presets and exit')
    
    args = parser.parse_args(argv)
    
    if args.list_presets:
        print("Available presets:")
        for name in list_presets():
            print(f"  - {name}")
        return
    
    run_simulation(build_config(args))


if __name__ == '__main__':
    main()
