"""Head-on collision preset."""

from orbital_sim.physics.body import Body
from orbital_sim.physics.state import SimulationState, DEFAULT_GRAVITY_CONSTANT, DEFAULT_TIME_STEP
from orbital_sim.physics.vector import Vec2
from orbital_sim.presets.base import Preset


class HeadOnCollision(Preset):
    """Two equal discs on the x axis moving straight at each other."""
    
    def __init__(
        self,
        gravity_constant: float = DEFAULT_GRAVITY_CONSTANT,
        time_step: float = DEFAULT_TIME_STEP,
        mass: float = 100.0,
        radius: float = 10.0,
        separation: float = 60.0,
        speed: float = 10.0,
    ):
        """Initialize head-on collision preset.
        
        Args:
            gravity_constant: Gravitational constant G
            time_step: Base time step
            mass: Mass of each disc
            radius: Radius of each disc
            separation: Initial center-to-center distance
            speed: Approach speed of each disc
        """
        super().__init__(gravity_constant, time_step)
        self.mass = mass
        self.radius = radius
        self.separation = separation
        self.speed = speed
    
    @property
    def name(self) -> str:
        return "head_on"
    
    def generate(self) -> SimulationState:
        half = self.separation / 2.0
        bodies = [
            Body(1, self.mass, Vec2(-half, 0.0), Vec2(self.speed, 0.0), self.radius, "#ff6600"),
            Body(2, self.mass, Vec2(half, 0.0), Vec2(-self.speed, 0.0), self.radius, "#33ccff"),
        ]
        return self._make_state(bodies)
