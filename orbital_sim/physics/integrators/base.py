"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Tuple
import numpy as np


class Integrator(ABC):
    """Abstract interface for numerical integrators."""
    
    @abstractmethod
    def step(
        self,
        positions: np.ndarray,
        velocities: np.ndarray,
        masses: np.ndarray,
        forces: np.ndarray,
        dt: float,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Perform one integration step.
        
        Args:
            positions: Current positions (n, 2)
            velocities: Current velocities (n, 2)
            masses: Masses (n,)
            forces: Net forces at the current positions (n, 2)
            dt: Effective time step
            
        Returns:
            Tuple of (new_positions, new_velocities)
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass
    
    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
