"""
Orbital Simulator - a 2D gravitational N-body engine with elastic collisions.

Features:
- Direct pairwise gravity with a contact-distance clamp
- Semi-implicit (symplectic) Euler integration
- Impulse-based collision response with positional correction
- Deterministic preset scenarios
- Lock-guarded session adapter for UI/command hosts
- matplotlib rendering, GIF export, JSON/NPZ state files
"""

__version__ = "0.1.0"

from orbital_sim.physics.simulator import Simulator, create_default
from orbital_sim.physics.state import SimulationState
from orbital_sim.session import SimulationSession

__all__ = [
    "Simulator",
    "SimulationState",
    "SimulationSession",
    "create_default",
]
