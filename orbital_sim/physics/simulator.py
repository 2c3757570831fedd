"""Main simulator controller."""

from dataclasses import replace
from typing import Optional
import numpy as np
from orbital_sim.physics.body import BodyPatch
from orbital_sim.physics.collisions import CollisionResolver
from orbital_sim.physics.diagnostics import Diagnostics
from orbital_sim.physics.force_calculator import ForceCalculator
from orbital_sim.physics.integrators.base import Integrator
from orbital_sim.physics.integrators.symplectic_euler import SymplecticEulerIntegrator
from orbital_sim.physics.state import SimulationState
from orbital_sim.presets import Preset, SolarSystem, get_preset


def create_default() -> SimulationState:
    """Build the default starting configuration (paused, elapsed time 0)."""
    return SolarSystem().generate()


class Simulator:
    """Main simulation controller.
    
    Owns one SimulationState and advances it one fixed step at a time:
    forces -> integrate -> resolve collisions -> advance clock.
    
    The simulator is passive and not thread-safe. Hosts that share it
    between threads must serialize every call (see SimulationSession).
    Everything returned to callers is a copy of the internal state.
    """
    
    def __init__(
        self,
        state: Optional[SimulationState] = None,
        preset: Optional[Preset] = None,
        integrator: Optional[Integrator] = None,
        force_calculator: Optional[ForceCalculator] = None,
        collision_resolver: Optional[CollisionResolver] = None,
    ):
        """Initialize simulator.
        
        Args:
            state: Initial state (default: generated from preset)
            preset: Preset used for the initial state and by reset() (default: SolarSystem)
            integrator: Integrator to use (default: symplectic Euler)
            force_calculator: Force model (default: vectorized, clamp 0.8)
            collision_resolver: Collision pass (default: restitution 0.7, 40% correction)
        """
        self.preset = preset or SolarSystem()
        self.integrator = integrator or SymplecticEulerIntegrator()
        self.force_calculator = force_calculator or ForceCalculator()
        self.collision_resolver = collision_resolver or CollisionResolver()
        self._state = state.copy() if state is not None else self.preset.generate()
        self.step_count = 0
    
    @classmethod
    def from_config(cls, config) -> "Simulator":
        """Build a simulator from a Config.

        Entries in config.preset_params override gravity_constant and time_step.

        Args:
            config: orbital_sim.utils.config.Config

        Returns:
            Configured simulator holding a fresh preset state
        """
        params = {
            'gravity_constant': config.gravity_constant,
            'time_step': config.time_step,
            **config.preset_params,
        }
        preset = get_preset(config.preset, **params)
        sim = cls(
            preset=preset,
            force_calculator=ForceCalculator(method=config.force_method, clamp_factor=config.clamp_factor),
            collision_resolver=CollisionResolver(
                restitution=config.restitution,
                correction_percent=config.correction_percent,
            ),
        )
        sim.set_time_multiplier(config.time_multiplier)
        return sim
    
    @property
    def time(self) -> float:
        return self._state.elapsed_time
    
    @property
    def is_running(self) -> bool:
        return self._state.is_running
    
    def step(self) -> SimulationState:
        """Advance one effective time step if running.
        
        Returns:
            Snapshot of the resulting state (unchanged state when paused)
        """
        state = self._state
        if not state.is_running:
            return self.get_state()
        
        dt = state.effective_time_step
        positions, velocities, masses, radii = state.to_arrays()
        
        forces = self.force_calculator.compute_forces(
            positions, masses, radii, state.gravity_constant
        )
        positions, velocities = self.integrator.step(positions, velocities, masses, forces, dt)
        positions, velocities = self.collision_resolver.resolve(positions, velocities, masses, radii)
        
        state.write_back(positions, velocities)
        state.elapsed_time += dt
        self.step_count += 1
        return self.get_state()
    
    def run(self, n_steps: int) -> SimulationState:
        """Run simulation for specified number of steps.
        
        Args:
            n_steps: Number of steps to run
        """
        for _ in range(n_steps):
            self.step()
        return self.get_state()
    
    def reset(self) -> SimulationState:
        """Replace the whole state with a fresh one from the preset."""
        self._state = self.preset.generate()
        self.step_count = 0
        return self.get_state()
    
    def set_running(self, running: bool):
        self._state.is_running = bool(running)
    
    def pause(self):
        """Pause simulation."""
        self.set_running(False)
    
    def resume(self):
        """Resume simulation."""
        self.set_running(True)
    
    def set_time_multiplier(self, multiplier: float):
        """Set the time multiplier.
        
        No range check: zero freezes the clock and negative values run time backward.
        """
        self._state.time_multiplier = multiplier
    
    def update_body(self, body_id: int, patch: Optional[BodyPatch] = None, **fields) -> bool:
        """Apply a partial update to one body.
        
        Args:
            body_id: Id of the body to change
            patch: Fields to apply
            **fields: mass, position_x, position_y, velocity_x, velocity_y, radius, color.
                Merged into patch; a keyword wins over the same patch field.
        
        Returns:
            True if a body with that id exists; an unknown id changes nothing
        """
        fields = {name: value for name, value in fields.items() if value is not None}
        patch = replace(patch or BodyPatch(), **fields)
        body = self._state.find_body(body_id)
        if body is None:
            return False
        patch.apply(body)
        return True
    
    def get_state(self) -> SimulationState:
        """Get a copy of the current simulation state."""
        return self._state.copy()
    
    def get_diagnostics(self) -> Diagnostics:
        return Diagnostics(self._state.gravity_constant, clamp_factor=self.force_calculator.clamp_factor)
    
    def get_energy(self):
        """Get current energies.
        
        Returns:
            Tuple of (kinetic, potential, total)
        """
        positions, velocities, masses, radii = self._state.to_arrays()
        return self.get_diagnostics().compute_energies(positions, velocities, masses, radii)
    
    def get_momentum(self) -> np.ndarray:
        """Get total linear momentum, shape (2,)."""
        _, velocities, masses, _ = self._state.to_arrays()
        return self.get_diagnostics().compute_momentum(velocities, masses)
    
    def get_angular_momentum(self) -> float:
        positions, velocities, masses, _ = self._state.to_arrays()
        return self.get_diagnostics().compute_angular_momentum(positions, velocities, masses)
