"""
Euclidean distance metric for clustering.

The default metric of the engine, used both for medoid selection against
cluster means and for reassignment against centroid points.
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


class EuclideanDistance(DistanceMetric):
    """Euclidean distance metric.

    Computes ||x - y||, the square root of the summed squared
    per-dimension differences.
    """

    def __init__(self, squared: bool = False):
        """
        Args:
            squared: If True, return squared distances.
                    If False (default), return actual Euclidean distances.
        """
        self.squared = squared

    def compute(self, points: Tensor, targets: Tensor, **kwargs) -> Tensor:
        """Compute Euclidean distances from points to targets.

        Args:
            points: (n, d) tensor of points
            targets: (d,) or (n, d) tensor of comparison points

        Returns:
            (n,) tensor of distances
        """
        diff = points - targets
        squared_distances = torch.sum(diff * diff, dim=-1)

        if self.squared:
            return squared_distances
        else:
            return torch.sqrt(squared_distances)

    def __repr__(self) -> str:
        return f"EuclideanDistance(squared={self.squared})"


class WeightedEuclideanDistance(DistanceMetric):
    """Weighted Euclidean distance with feature weights.

    Computes sqrt(sum_i w_i * (x_i - y_i)²) where w_i are feature weights.
    Useful when vectorized features live on very different scales.
    """

    def __init__(self, weights, squared: bool = False):
        """
        Args:
            weights: (d,) non-negative feature weights
            squared: Whether to return squared distances
        """
        self.weights = torch.as_tensor(weights, dtype=torch.float64)
        if self.weights.dim() != 1:
            raise ValueError(f"Feature weights must be 1D, got {self.weights.dim()}D")
        if (self.weights < 0).any():
            raise ValueError("Feature weights must be non-negative")
        self.squared = squared

    def compute(self, points: Tensor, targets: Tensor, **kwargs) -> Tensor:
        """Compute weighted Euclidean distances.

        Args:
            points: (n, d) tensor of points
            targets: (d,) or (n, d) tensor of comparison points

        Returns:
            (n,) tensor of distances
        """
        if self.weights.shape[0] != points.shape[-1]:
            raise ValueError(f"Expected {self.weights.shape[0]} features, "
                             f"got {points.shape[-1]}")

        # Ensure weights are on same device and dtype
        weights = self.weights.to(device=points.device, dtype=points.dtype)

        diff = points - targets
        squared_distances = torch.sum(weights * diff * diff, dim=-1)

        if self.squared:
            return squared_distances
        else:
            return torch.sqrt(squared_distances)
