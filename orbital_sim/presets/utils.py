"""Orbit helpers shared by presets."""

import math
from typing import Tuple
from orbital_sim.physics.vector import Vec2


def circular_orbit_speed(G: float, central_mass: float, distance: float) -> float:
    """Speed of a circular orbit around a point mass.
    
    v = sqrt(G * M / r)
    
    Args:
        G: Gravitational constant
        central_mass: Mass being orbited
        distance: Orbital radius
        
    Returns:
        Circular orbital speed
    """
    return math.sqrt(G * central_mass / distance)


def orbit_offset(distance: float, speed: float, angle: float) -> Tuple[Vec2, Vec2]:
    """Position and velocity on a counter-clockwise circular orbit.
    
    Position is distance*(cos a, sin a); velocity is tangential,
    speed*(-sin a, cos a). Both are relative to the orbited body.
    
    Args:
        distance: Orbital radius
        speed: Orbital speed
        angle: Phase angle in radians
        
    Returns:
        Tuple of (relative_position, relative_velocity)
    """
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    position = Vec2(cos_a * distance, sin_a * distance)
    velocity = Vec2(-sin_a * speed, cos_a * speed)
    return position, velocity
