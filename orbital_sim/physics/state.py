"""Simulation state: body list plus global parameters."""

import copy
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import numpy as np
from orbital_sim.physics.body import Body
from orbital_sim.physics.vector import Vec2

DEFAULT_TIME_STEP = 0.01
DEFAULT_GRAVITY_CONSTANT = 6.67430e-1


@dataclass
class SimulationState:
    """Complete state of one simulation.
    
    Bodies keep insertion order for the lifetime of the state; nothing in the
    engine adds or removes bodies while stepping.
    """
    
    bodies: List[Body] = field(default_factory=list)
    time_step: float = DEFAULT_TIME_STEP
    time_multiplier: float = 1.0
    gravity_constant: float = DEFAULT_GRAVITY_CONSTANT
    is_running: bool = False
    elapsed_time: float = 0.0
    
    @property
    def effective_time_step(self) -> float:
        """Base time step scaled by the time multiplier."""
        return self.time_step * self.time_multiplier
    
    @property
    def n_bodies(self) -> int:
        return len(self.bodies)
    
    def find_body(self, body_id: int) -> Optional[Body]:
        """Return the body with the given id, or None."""
        for body in self.bodies:
            if body.id == body_id:
                return body
        return None
    
    def copy(self) -> "SimulationState":
        """Deep copy; the result shares nothing with this state."""
        return copy.deepcopy(self)
    
    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Pack kinematic state into numpy arrays.
        
        Returns:
            Tuple of (positions (n, 2), velocities (n, 2), masses (n,), radii (n,))
        """
        n = len(self.bodies)
        positions = np.zeros((n, 2))
        velocities = np.zeros((n, 2))
        masses = np.zeros(n)
        radii = np.zeros(n)
        for k, body in enumerate(self.bodies):
            positions[k] = (body.position.x, body.position.y)
            velocities[k] = (body.velocity.x, body.velocity.y)
            masses[k] = body.mass
            radii[k] = body.radius
        return positions, velocities, masses, radii
    
    def write_back(self, positions: np.ndarray, velocities: np.ndarray):
        """Copy integrated positions and velocities back onto the bodies.
        
        Args:
            positions: Array of shape (n, 2), same order as bodies
            velocities: Array of shape (n, 2)
        """
        for k, body in enumerate(self.bodies):
            body.position = Vec2(float(positions[k, 0]), float(positions[k, 1]))
            body.velocity = Vec2(float(velocities[k, 0]), float(velocities[k, 1]))
    
    def to_dict(self) -> dict:
        return {
            "bodies": [body.to_dict() for body in self.bodies],
            "time_step": self.time_step,
            "time_multiplier": self.time_multiplier,
            "gravity_constant": self.gravity_constant,
            "is_running": self.is_running,
            "elapsed_time": self.elapsed_time,
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> "SimulationState":
        return cls(
            bodies=[Body.from_dict(b) for b in data.get("bodies", [])],
            time_step=float(data.get("time_step", DEFAULT_TIME_STEP)),
            time_multiplier=float(data.get("time_multiplier", 1.0)),
            gravity_constant=float(data.get("gravity_constant", DEFAULT_GRAVITY_CONSTANT)),
            is_running=bool(data.get("is_running", False)),
            elapsed_time=float(data.get("elapsed_time", 0.0)),
        )
