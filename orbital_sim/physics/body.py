"""Body record and partial-update patch."""

from dataclasses import dataclass, replace
from typing import Optional
from orbital_sim.physics.vector import Vec2


@dataclass
class Body:
    """A disc mass taking part in gravity and collisions.
    
    Attributes:
        id: Identifier, unique within one simulation
        mass: Mass (positive at construction)
        position: Center position
        velocity: Velocity
        radius: Visual and collision radius
        color: Display tag (e.g. '#ffcc00'), opaque to the engine
    """
    
    id: int
    mass: float
    position: Vec2
    velocity: Vec2
    radius: float
    color: str
    
    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "mass": self.mass,
            "position": self.position.to_dict(),
            "velocity": self.velocity.to_dict(),
            "radius": self.radius,
            "color": self.color,
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> "Body":
        return cls(
            id=int(data["id"]),
            mass=float(data["mass"]),
            position=Vec2.from_dict(data["position"]),
            velocity=Vec2.from_dict(data["velocity"]),
            radius=float(data["radius"]),
            color=str(data["color"]),
        )


@dataclass
class BodyPatch:
    """Partial update for a single body.
    
    Every field is optional; only fields that are not None are applied.
    No range or sign checks are made on any value.
    """
    
    mass: Optional[float] = None
    position_x: Optional[float] = None
    position_y: Optional[float] = None
    velocity_x: Optional[float] = None
    velocity_y: Optional[float] = None
    radius: Optional[float] = None
    color: Optional[str] = None
    
    def is_empty(self) -> bool:
        """Return True if the patch carries no fields."""
        return all(value is None for value in vars(self).values())
    
    def apply(self, body: Body):
        """Apply the present fields to body in place.
        
        Args:
            body: Body to modify
        """
        if self.mass is not None:
            body.mass = self.mass
        if self.position_x is not None:
            body.position = replace(body.position, x=self.position_x)
        if self.position_y is not None:
            body.position = replace(body.position, y=self.position_y)
        if self.velocity_x is not None:
            body.velocity = replace(body.velocity, x=self.velocity_x)
        if self.velocity_y is not None:
            body.velocity = replace(body.velocity, y=self.velocity_y)
        if self.radius is not None:
            body.radius = self.radius
        if self.color is not None:
            body.color = self.color
