"""Physics engine for 2D N-body simulations."""

from orbital_sim.physics.vector import Vec2
from orbital_sim.physics.body import Body, BodyPatch
from orbital_sim.physics.state import SimulationState

__all__ = ["Vec2", "Body", "BodyPatch", "SimulationState"]
