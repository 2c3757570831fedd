"""Host adapter: one simulator behind one lock, with a command surface.

UI or RPC hosts hold a SimulationSession instead of touching the Simulator
directly. Every command runs to completion inside a single exclusive lock,
so a state read can never interleave with a step in progress. Results are
plain dicts ready for serialization.
"""

import threading
from typing import Any, Callable, Dict, Optional
from orbital_sim.physics.body import BodyPatch
from orbital_sim.physics.simulator import Simulator


class SimulationSession:
    """Lock-guarded handle around a single Simulator."""
    
    def __init__(self, simulator: Optional[Simulator] = None):
        """Initialize session.
        
        Args:
            simulator: Simulator to own (default: a new default Simulator)
        """
        self._simulator = simulator or Simulator()
        self._lock = threading.Lock()
        self._commands: Dict[str, Callable[..., Any]] = {
            "get_simulation_state": self.get_simulation_state,
            "set_simulation_running": self.set_simulation_running,
            "reset_simulation": self.reset_simulation,
            "step_simulation": self.step_simulation,
            "update_body": self.update_body,
            "set_time_multiplier": self.set_time_multiplier,
        }
    
    @property
    def commands(self):
        return sorted(self._commands)
    
    def invoke(self, command: str, **kwargs) -> Any:
        """Dispatch a command by name.
        
        Args:
            command: One of the command names in `commands`
            **kwargs: Command arguments
        
        Returns:
            Whatever the command returns (a state dict or None)
        """
        handler = self._commands.get(command)
        if handler is None:
            raise ValueError(f"Unknown command: {command}. Available: {self.commands}")
        return handler(**kwargs)
    
    def get_simulation_state(self) -> dict:
        with self._lock:
            return self._simulator.get_state().to_dict()
    
    def set_simulation_running(self, running: bool):
        with self._lock:
            self._simulator.set_running(running)
    
    def reset_simulation(self):
        with self._lock:
            self._simulator.reset()
    
    def step_simulation(self) -> dict:
        with self._lock:
            return self._simulator.step().to_dict()
    
    def set_time_multiplier(self, multiplier: float):
        with self._lock:
            self._simulator.set_time_multiplier(multiplier)
    
    def update_body(
        self,
        id: int,
        mass: Optional[float] = None,
        position_x: Optional[float] = None,
        position_y: Optional[float] = None,
        velocity_x: Optional[float] = None,
        velocity_y: Optional[float] = None,
        radius: Optional[float] = None,
        color: Optional[str] = None,
    ):
        """Apply the given fields to body `id`; unknown ids are ignored."""
        patch = BodyPatch(
            mass=mass,
            position_x=position_x,
            position_y=position_y,
            velocity_x=velocity_x,
            velocity_y=velocity_y,
            radius=radius,
            color=color,
        )
        with self._lock:
            self._simulator.update_body(id, patch)
