"""Numerical integrators for the N-body engine."""

from orbital_sim.physics.integrators.base import Integrator
from orbital_sim.physics.integrators.symplectic_euler import SymplecticEulerIntegrator

__all__ = ["Integrator", "SymplecticEulerIntegrator"]
