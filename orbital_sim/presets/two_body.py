"""Two-body circular orbit preset."""

from orbital_sim.physics.body import Body
from orbital_sim.physics.state import SimulationState, DEFAULT_GRAVITY_CONSTANT, DEFAULT_TIME_STEP
from orbital_sim.physics.vector import Vec2
from orbital_sim.presets.base import Preset
from orbital_sim.presets.utils import circular_orbit_speed


class TwoBody(Preset):
    """A satellite on a circular orbit around a central mass at rest."""
    
    def __init__(
        self,
        gravity_constant: float = DEFAULT_GRAVITY_CONSTANT,
        time_step: float = DEFAULT_TIME_STEP,
        central_mass: float = 8.0e3,
        satellite_mass: float = 1.0e3,
        distance: float = 120.0,
        central_radius: float = 25.0,
        satellite_radius: float = 10.0,
    ):
        super().__init__(gravity_constant, time_step)
        self.central_mass = central_mass
        self.satellite_mass = satellite_mass
        self.distance = distance
        self.central_radius = central_radius
        self.satellite_radius = satellite_radius
    
    @property
    def name(self) -> str:
        return "two_body"
    
    def generate(self) -> SimulationState:
        speed = circular_orbit_speed(self.gravity_constant, self.central_mass, self.distance)
        bodies = [
            Body(1, self.central_mass, Vec2(0.0, 0.0), Vec2(0.0, 0.0), self.central_radius, "#ffcc00"),
            Body(2, self.satellite_mass, Vec2(self.distance, 0.0), Vec2(0.0, speed), self.satellite_radius, "#3366ff"),
        ]
        return self._make_state(bodies)
