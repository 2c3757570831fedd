"""Conserved-quantity diagnostics for the N-body engine."""

from typing import Tuple
import numpy as np


class Diagnostics:
    """Compute energies and momenta consistent with the clamped force law."""
    
    def __init__(self, G: float, clamp_factor: float = 0.8):
        """Initialize diagnostics.
        
        Args:
            G: Gravitational constant
            clamp_factor: Contact clamp (must match the force calculator)
        """
        self.G = G
        self.clamp_factor = clamp_factor
    
    def compute_energies(
        self,
        positions: np.ndarray,
        velocities: np.ndarray,
        masses: np.ndarray,
        radii: np.ndarray,
    ) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.
        
        Potential uses the same clamped separation as the force law:
        U = -G * Σ_{i<j} m_i * m_j / max(r_ij, clamp_factor * (R_i + R_j))
        
        Coincident pairs are skipped, as they are in the force calculation.
        
        Args:
            positions: (n, 2) positions
            velocities: (n, 2) velocities
            masses: (n,) masses
            radii: (n,) radii
            
        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        masses = np.asarray(masses).flatten()
        
        # K = 0.5 * Σ m_i * v_i^2
        v_sq = np.sum(velocities ** 2, axis=1)
        K = 0.5 * np.sum(masses * v_sq)
        
        n = len(masses)
        U = 0.0
        if n > 1:
            i_idx, j_idx = np.triu_indices(n, k=1)
            dist = np.sqrt(np.sum((positions[j_idx] - positions[i_idx]) ** 2, axis=1))
            clamped_dist = np.maximum(dist, (radii[i_idx] + radii[j_idx]) * self.clamp_factor)
            separated = dist > 0.0
            U = -np.sum(
                self.G * masses[i_idx][separated] * masses[j_idx][separated] / clamped_dist[separated]
            )
        
        return float(K), float(U), float(K + U)
    
    def compute_momentum(self, velocities: np.ndarray, masses: np.ndarray) -> np.ndarray:
        """Total linear momentum Σ m_i v_i, shape (2,)."""
        masses = np.asarray(masses).flatten()
        return np.sum(masses[:, np.newaxis] * velocities, axis=0)
    
    def compute_angular_momentum(self, positions: np.ndarray, velocities: np.ndarray, masses: np.ndarray) -> float:
        """Angular momentum about the origin.
        
        Returns:
            L_z = Σ m_i * (x_i * v_y_i - y_i * v_x_i)
        """
        masses = np.asarray(masses).flatten()
        L_z = np.sum(masses * (positions[:, 0] * velocities[:, 1] - positions[:, 1] * velocities[:, 0]))
        return float(L_z)
    
    def compute_center_of_mass(self, positions: np.ndarray, masses: np.ndarray) -> np.ndarray:
        """Mass-weighted mean position, shape (2,)."""
        masses = np.asarray(masses).flatten()
        total_mass = np.sum(masses)
        return np.sum(masses[:, np.newaxis] * positions, axis=0) / total_mass
