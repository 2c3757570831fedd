"""Rendering for 2D visualization."""

from orbital_sim.render.base import Renderer
from orbital_sim.render.renderer_2d import Renderer2D

__all__ = ["Renderer", "Renderer2D"]
