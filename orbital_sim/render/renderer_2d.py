"""2D renderer using matplotlib."""

from collections import deque
from typing import Deque, Dict, Optional, Tuple
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.patches import Circle
from orbital_sim.physics.state import SimulationState
from orbital_sim.render.base import Renderer


class Renderer2D(Renderer):
    """Draws bodies as filled discs of their own radius and color."""
    
    def __init__(
        self,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        show_trails: bool = True,
        trail_length: int = 200,
        interactive: bool = True,
        background: str = "#05050f",
        show_labels: bool = True,
    ):
        """Initialize 2D renderer.
        
        Args:
            figsize: Figure size (width, height)
            dpi: Dots per inch
            show_trails: Whether to draw each body's recent path
            trail_length: Number of previous positions kept per body
            interactive: Show a window and pause briefly after each frame
            background: Axes face color
            show_labels: Write each body id just above its disc
        """
        self.figsize = figsize
        self.dpi = dpi
        self.show_trails = show_trails
        self.trail_length = trail_length
        self.interactive = interactive
        self.background = background
        self.show_labels = show_labels
        
        self.fig: Optional[Figure] = None
        self.ax = None
        self.trails: Dict[int, Deque[Tuple[float, float]]] = {}
        self.initialized = False
    
    def _initialize(self):
        """Create the figure on first use."""
        if self.initialized:
            return
        self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
        if self.interactive:
            plt.show(block=False)
        self.initialized = True
    
    def _update_trails(self, state: SimulationState):
        for body in state.bodies:
            trail = self.trails.setdefault(body.id, deque(maxlen=self.trail_length))
            trail.append((body.position.x, body.position.y))
    
    def render(self, state: SimulationState):
        """Render current frame."""
        self._initialize()
        if self.show_trails:
            self._update_trails(state)
        
        self.ax.clear()
        self.ax.set_aspect('equal')
        self.ax.set_facecolor(self.background)
        self.ax.set_xlabel('X')
        self.ax.set_ylabel('Y')
        self.ax.set_title(f'Orbital Simulation  t = {state.elapsed_time:.2f}')
        
        if self.show_trails:
            colors = {body.id: body.color for body in state.bodies}
            for body_id, trail in self.trails.items():
                if len(trail) < 2 or body_id not in colors:
                    continue
                points = np.asarray(trail)
                self.ax.plot(points[:, 0], points[:, 1], '-', color=colors[body_id], alpha=0.4, linewidth=0.8)
        
        for body in state.bodies:
            self.ax.add_patch(Circle(
                (body.position.x, body.position.y),
                radius=abs(body.radius),
                color=body.color,
            ))
            if self.show_labels:
                self.ax.text(
                    body.position.x, body.position.y + abs(body.radius),
                    str(body.id), color="white", fontsize=8,
                    ha="center", va="bottom",
                )
        
        # Frame everything with a margin
        if state.bodies:
            positions, _, _, radii = state.to_arrays()
            reach = np.max(np.abs(positions) + np.abs(radii)[:, np.newaxis])
            limit = max(float(reach), 10.0) * 1.1
            self.ax.set_xlim(-limit, limit)
            self.ax.set_ylim(-limit, limit)
        
        if self.interactive:
            self.fig.canvas.draw_idle()
            plt.pause(0.001)
    
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")
        
        self.fig.canvas.draw()
        rgba = np.asarray(self.fig.canvas.buffer_rgba())
        return rgba[:, :, :3].copy()
    
    def clear(self):
        """Clear the renderer."""
        self.trails.clear()
        if self.ax is not None:
            self.ax.clear()
    
    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.initialized = False
