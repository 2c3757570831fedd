"""Pairwise gravitational force calculation with a contact-distance clamp.

Forces are evaluated directly over every unordered pair of bodies. The
distance entering the magnitude is clamped from below to a fraction of the
summed radii so touching or overlapping discs do not produce singular
forces; the direction still uses the true separation.
"""

from typing import Literal
import numpy as np


class ForceCalculator:
    """Direct-summation gravity for small body counts (tens of bodies)."""
    
    METHODS = ("vectorized", "direct")
    
    def __init__(
        self,
        method: Literal["vectorized", "direct"] = "vectorized",
        clamp_factor: float = 0.8,
    ):
        """Initialize force calculator.
        
        Args:
            method: 'vectorized' (numpy pair arrays) or 'direct' (explicit loop)
            clamp_factor: Minimum magnitude distance as a fraction of r_i + r_j
        """
        if method not in self.METHODS:
            raise ValueError(f"Unknown force method: {method}. Available: {list(self.METHODS)}")
        self.method = method
        self.clamp_factor = clamp_factor
    
    def compute_forces(
        self,
        positions: np.ndarray,
        masses: np.ndarray,
        radii: np.ndarray,
        G: float,
    ) -> np.ndarray:
        """Compute the net gravitational force on every body.
        
        Args:
            positions: (n, 2) positions
            masses: (n,) masses
            radii: (n,) radii
            G: Gravitational constant
        
        Returns:
            (n, 2) array of net forces
        """
        if self.method == "direct":
            return self._compute_forces_loop(positions, masses, radii, G)
        return self._compute_forces_vectorized(positions, masses, radii, G)
    
    def _compute_forces_vectorized(self, positions, masses, radii, G) -> np.ndarray:
        n = positions.shape[0]
        forces = np.zeros((n, 2))
        if n < 2:
            return forces
        
        # One row per unordered pair (i < j)
        i_idx, j_idx = np.triu_indices(n, k=1)
        r_diff = positions[j_idx] - positions[i_idx]
        dist = np.sqrt(np.sum(r_diff ** 2, axis=1))
        
        # Coincident pairs have no direction: leave their force at zero
        separated = dist > 0.0
        i_sep, j_sep = i_idx[separated], j_idx[separated]
        dist_sep = dist[separated]
        
        min_dist = (radii[i_sep] + radii[j_sep]) * self.clamp_factor
        clamped_dist = np.maximum(dist_sep, min_dist)
        force_magnitude = G * masses[i_sep] * masses[j_sep] / (clamped_dist * clamped_dist)
        
        pair_forces = np.zeros_like(r_diff)
        pair_forces[separated] = (
            force_magnitude[:, np.newaxis] * r_diff[separated] / dist_sep[:, np.newaxis]
        )
        
        # Same pair vector with both signs: Newton's third law by construction
        np.add.at(forces, i_idx, pair_forces)
        np.subtract.at(forces, j_idx, pair_forces)
        return forces
    
    def _compute_forces_loop(self, positions, masses, radii, G) -> np.ndarray:
        """Loop-based force calculation (reference path)."""
        n = positions.shape[0]
        forces = np.zeros((n, 2))
        
        for i in range(n):
            for j in range(i + 1, n):
                dx = positions[j, 0] - positions[i, 0]
                dy = positions[j, 1] - positions[i, 1]
                dist = np.sqrt(dx * dx + dy * dy)
                if dist == 0.0:
                    continue
                
                min_dist = (radii[i] + radii[j]) * self.clamp_factor
                clamped_dist = max(dist, min_dist)
                force_magnitude = G * masses[i] * masses[j] / (clamped_dist * clamped_dist)
                
                force_x = force_magnitude * dx / dist
                force_y = force_magnitude * dy / dist
                forces[i, 0] += force_x
                forces[i, 1] += force_y
                forces[j, 0] -= force_x
                forces[j, 1] -= force_y
        
        return forces
