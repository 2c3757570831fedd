"""Default scenario: a star, four planets, and two moons around the third planet."""

import math
from typing import Sequence, Tuple
from orbital_sim.physics.body import Body
from orbital_sim.physics.state import SimulationState, DEFAULT_GRAVITY_CONSTANT, DEFAULT_TIME_STEP
from orbital_sim.physics.vector import Vec2
from orbital_sim.presets.base import Preset
from orbital_sim.presets.utils import circular_orbit_speed, orbit_offset

# (mass, orbital distance, radius, color)
OrbitSpec = Tuple[float, float, float, str]

DEFAULT_PLANETS: Tuple[OrbitSpec, ...] = (
    (1.0e3, 120.0, 10.0, "#ff9999"),
    (1.5e3, 200.0, 12.0, "#3366ff"),
    (3.0e3, 350.0, 18.0, "#ff6600"),
    (2.0e3, 450.0, 15.0, "#33ccff"),
)

DEFAULT_MOONS: Tuple[OrbitSpec, ...] = (
    (100.0, 35.0, 4.0, "#cccccc"),
    (50.0, 25.0, 3.0, "#aaaaaa"),
)


class SolarSystem(Preset):
    """Central star with planets on circular orbits; one planet hosts moons.
    
    Planets are spread evenly over a full circle, moons over a half circle
    around their host. The host is chosen by its position in the planet
    list, not by any property of the planet.
    """
    
    def __init__(
        self,
        gravity_constant: float = DEFAULT_GRAVITY_CONSTANT,
        time_step: float = DEFAULT_TIME_STEP,
        central_mass: float = 8.0e3,
        central_radius: float = 25.0,
        central_color: str = "#ffcc00",
        planets: Sequence[OrbitSpec] = DEFAULT_PLANETS,
        moons: Sequence[OrbitSpec] = DEFAULT_MOONS,
        moon_host_index: int = 2,
    ):
        """Initialize solar system preset.
        
        Args:
            gravity_constant: Gravitational constant G
            time_step: Base time step
            central_mass: Mass of the star
            central_radius: Radius of the star
            central_color: Display color of the star
            planets: Planet (mass, distance, radius, color) tuples, in id order
            moons: Moon (mass, distance, radius, color) tuples, in id order
            moon_host_index: Index into planets of the body the moons orbit
        """
        super().__init__(gravity_constant, time_step)
        self.central_mass = central_mass
        self.central_radius = central_radius
        self.central_color = central_color
        self.planets = tuple(tuple(p) for p in planets)
        self.moons = tuple(tuple(m) for m in moons)
        self.moon_host_index = moon_host_index
    
    @property
    def name(self) -> str:
        return "solar_system"
    
    def generate(self) -> SimulationState:
        """Generate the default solar system state."""
        G = self.gravity_constant
        
        star = Body(
            id=1,
            mass=self.central_mass,
            position=Vec2(0.0, 0.0),
            velocity=Vec2(0.0, 0.0),
            radius=self.central_radius,
            color=self.central_color,
        )
        
        planets = self._generate_planets(G, first_id=2)
        moons = self._generate_moons(G, planets, first_id=2 + len(planets))
        
        return self._make_state((star,) + planets + moons)
    
    def _generate_planets(self, G: float, first_id: int) -> Tuple[Body, ...]:
        n = len(self.planets)
        planets = []
        for i, (mass, distance, radius, color) in enumerate(self.planets):
            speed = circular_orbit_speed(G, self.central_mass, distance)
            angle = math.pi * 2.0 * i / n
            position, velocity = orbit_offset(distance, speed, angle)
            planets.append(Body(first_id + i, mass, position, velocity, radius, color))
        return tuple(planets)
    
    def _generate_moons(self, G: float, planets: Tuple[Body, ...], first_id: int) -> Tuple[Body, ...]:
        if not self.moons:
            return ()
        
        # Host values are read from the finished planet tuple, never from a list still growing
        host = planets[self.moon_host_index]
        host_mass = host.mass
        host_position = host.position
        host_velocity = host.velocity
        
        n = len(self.moons)
        moons = []
        for i, (mass, distance, radius, color) in enumerate(self.moons):
            speed = circular_orbit_speed(G, host_mass, distance)
            angle = math.pi * i / n
            offset_position, offset_velocity = orbit_offset(distance, speed, angle)
            moons.append(Body(
                first_id + i,
                mass,
                host_position + offset_position,
                host_velocity + offset_velocity,
                radius,
                color,
            ))
        return tuple(moons)
