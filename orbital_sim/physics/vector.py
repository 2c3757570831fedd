"""Immutable 2D vector type."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """2D real-valued vector. Operations return new instances."""
    
    x: float = 0.0
    y: float = 0.0
    
    def distance(self, other: "Vec2") -> float:
        """Euclidean distance to another vector."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)
    
    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)
    
    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)
    
    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)
    
    __rmul__ = __mul__
    
    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}
    
    @classmethod
    def from_dict(cls, data: dict) -> "Vec2":
        return cls(float(data["x"]), float(data["y"]))
