"""Semi-implicit (symplectic) Euler integrator."""

from typing import Tuple
import numpy as np
from orbital_sim.physics.integrators.base import Integrator


class SymplecticEulerIntegrator(Integrator):
    """Semi-implicit Euler: kick the velocity, then drift with the new velocity.
    
    v_new = v + (F/m)*dt
    x_new = x + v_new*dt
    
    Using v_new (not v) in the drift makes the scheme symplectic, so orbits
    stay bounded instead of spiralling outward as with explicit Euler.
    """
    
    @property
    def name(self) -> str:
        return "symplectic_euler"
    
    @property
    def order(self) -> int:
        return 1
    
    def step(self, positions, velocities, masses, forces, dt: float) -> Tuple[np.ndarray, np.ndarray]:
        """Symplectic Euler step.
        
        Args:
            positions: Current positions (n, 2)
            velocities: Current velocities (n, 2)
            masses: Masses (n,)
            forces: Net forces (n, 2)
            dt: Effective time step (may be zero or negative)
            
        Returns:
            Tuple of (new_positions, new_velocities)
        """
        masses_1d = np.asarray(masses).flatten()
        accelerations = forces / masses_1d[:, np.newaxis]
        
        new_velocities = velocities + accelerations * dt
        new_positions = positions + new_velocities * dt
        
        return new_positions, new_velocities
