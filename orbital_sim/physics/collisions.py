"""Impulse-based collision handling for overlapping discs."""

from typing import Tuple
import numpy as np


class CollisionResolver:
    """Detect overlapping pairs and apply impulse plus positional correction.
    
    Every pair is detected and resolved against the same post-integration
    snapshot. Per-pair velocity and position deltas are summed per body and
    applied in a single update, so the result does not depend on pair order.
    This is a penalty/impulse scheme: some overlap may remain after one pass.
    """
    
    def __init__(
        self,
        restitution: float = 0.7,
        correction_percent: float = 0.4,
        min_separation: float = 1e-3,
    ):
        """Initialize collision resolver.
        
        Args:
            restitution: Coefficient of restitution (0 inelastic, 1 elastic)
            correction_percent: Fraction of penetration removed per pass
            min_separation: Lower bound on the distance used to normalize the contact normal
        """
        self.restitution = restitution
        self.correction_percent = correction_percent
        self.min_separation = min_separation
    
    def detect(self, positions: np.ndarray, radii: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Find all overlapping pairs.
        
        Args:
            positions: (n, 2) positions
            radii: (n,) radii
        
        Returns:
            Tuple of (i_idx, j_idx, distances) for pairs with i < j and
            center distance below the summed radii
        """
        n = positions.shape[0]
        i_idx, j_idx = np.triu_indices(n, k=1)
        r_diff = positions[j_idx] - positions[i_idx]
        dist = np.sqrt(np.sum(r_diff ** 2, axis=1))
        overlapping = dist < (radii[i_idx] + radii[j_idx])
        return i_idx[overlapping], j_idx[overlapping], dist[overlapping]
    
    def resolve(
        self,
        positions: np.ndarray,
        velocities: np.ndarray,
        masses: np.ndarray,
        radii: np.ndarray,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Resolve all collisions for one step.
        
        Args:
            positions: (n, 2) post-integration positions
            velocities: (n, 2) post-integration velocities
            masses: (n,) masses
            radii: (n,) radii
        
        Returns:
            Tuple of (new_positions, new_velocities)
        """
        i_idx, j_idx, dist = self.detect(positions, radii)
        if i_idx.size == 0:
            return positions.copy(), velocities.copy()
        
        # Contact normal from i to j
        r_diff = positions[j_idx] - positions[i_idx]
        inv_dist = 1.0 / np.maximum(dist, self.min_separation)
        normal = r_diff * inv_dist[:, np.newaxis]
        
        rel_vel = velocities[j_idx] - velocities[i_idx]
        vel_along_normal = np.sum(rel_vel * normal, axis=1)
        
        # Pairs already separating are left alone
        approaching = vel_along_normal < 0.0
        i_idx = i_idx[approaching]
        j_idx = j_idx[approaching]
        dist = dist[approaching]
        normal = normal[approaching]
        vel_along_normal = vel_along_normal[approaching]
        
        inv_mass_i = 1.0 / masses[i_idx]
        inv_mass_j = 1.0 / masses[j_idx]
        inv_mass_sum = inv_mass_i + inv_mass_j
        
        impulse_scalar = -(1.0 + self.restitution) * vel_along_normal / inv_mass_sum
        impulse = impulse_scalar[:, np.newaxis] * normal
        vel_change_i = -impulse * inv_mass_i[:, np.newaxis]
        vel_change_j = impulse * inv_mass_j[:, np.newaxis]
        
        # Heavier body moves less
        penetration = (radii[i_idx] + radii[j_idx]) - dist
        correction = normal * (penetration * self.correction_percent)[:, np.newaxis]
        pos_corr_i = -correction * (inv_mass_i / inv_mass_sum)[:, np.newaxis]
        pos_corr_j = correction * (inv_mass_j / inv_mass_sum)[:, np.newaxis]
        
        velocity_delta = np.zeros_like(velocities)
        position_delta = np.zeros_like(positions)
        np.add.at(velocity_delta, i_idx, vel_change_i)
        np.add.at(velocity_delta, j_idx, vel_change_j)
        np.add.at(position_delta, i_idx, pos_corr_i)
        np.add.at(position_delta, j_idx, pos_corr_j)
        
        return positions + position_delta, velocities + velocity_delta
