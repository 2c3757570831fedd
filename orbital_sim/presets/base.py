"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from orbital_sim.physics.state import SimulationState, DEFAULT_GRAVITY_CONSTANT, DEFAULT_TIME_STEP


class Preset(ABC):
    """Abstract base class for preset scenarios.
    
    A preset is a deterministic recipe: calling generate() twice yields
    identical states.
    """
    
    def __init__(
        self,
        gravity_constant: float = DEFAULT_GRAVITY_CONSTANT,
        time_step: float = DEFAULT_TIME_STEP,
    ):
        """Initialize preset.
        
        Args:
            gravity_constant: Gravitational constant G stored in the state
            time_step: Base time step stored in the state
        """
        self.gravity_constant = gravity_constant
        self.time_step = time_step
    
    @abstractmethod
    def generate(self) -> SimulationState:
        """Generate a fresh, paused simulation state."""
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
    
    def _make_state(self, bodies) -> SimulationState:
        return SimulationState(
            bodies=list(bodies),
            time_step=self.time_step,
            time_multiplier=1.0,
            gravity_constant=self.gravity_constant,
            is_running=False,
            elapsed_time=0.0,
        )
