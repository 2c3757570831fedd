"""Base renderer interface."""

from abc import ABC, abstractmethod
import numpy as np
from orbital_sim.physics.state import SimulationState


class Renderer(ABC):
    """Abstract base class for renderers."""
    
    @abstractmethod
    def render(self, state: SimulationState):
        """Render current frame.
        
        Args:
            state: Snapshot to draw
        """
        pass
    
    @abstractmethod
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array.
        
        Returns:
            Image array (H, W, 3) uint8
        """
        pass
    
    @abstractmethod
    def clear(self):
        """Clear the renderer."""
        pass
    
    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass
