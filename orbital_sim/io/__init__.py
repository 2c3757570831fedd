"""I/O utilities for export and state management."""

from orbital_sim.io.gif_exporter import GIFExporter
from orbital_sim.io.state_io import save_state, load_state

__all__ = ["GIFExporter", "save_state", "load_state"]
