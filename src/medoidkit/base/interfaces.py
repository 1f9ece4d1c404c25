"""
Core interfaces for the medoidkit clustering components.

This module defines the abstract base classes that the pluggable pieces of
the refinement loop implement, so the engine can swap metrics, initializers
and assignment rules without changing the loop itself.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Tuple
import torch
from torch import Tensor


class DistanceMetric(ABC):
    """Abstract base class for point-to-point distance computations.

    A metric compares rows of ``points`` against ``targets`` pairwise.
    ``targets`` is either a single (d,) vector broadcast against every row,
    or an (n, d) tensor compared row by row.
    """

    @abstractmethod
    def compute(self, points: Tensor, targets: Tensor, **kwargs) -> Tensor:
        """Compute distances between points and targets.

        Args:
            points: (n, d) tensor of points
            targets: (d,) or (n, d) tensor of comparison points
            **kwargs: Metric-specific parameters

        Returns:
            (n,) tensor of non-negative distances
        """
        pass

    def __call__(self, a, b) -> float:
        """Distance between two single vectors."""
        a = torch.as_tensor(a, dtype=torch.float64)
        b = torch.as_tensor(b, dtype=torch.float64)
        return float(self.compute(a.unsqueeze(0), b)[0])


class InitializationStrategy(ABC):
    """Abstract base class for initial membership strategies."""

    @abstractmethod
    def initialize(self, points: Tensor, n_clusters: int,
                   metric: DistanceMetric, **kwargs) -> Tuple[Tensor, Tensor]:
        """Produce the first membership assignment.

        Args:
            points: (n, d) tensor of data points
            n_clusters: Number of clusters K
            metric: Active distance metric
            **kwargs: Strategy-specific parameters

        Returns:
            labels: (n,) long tensor of cluster indices in [0, K)
            centroid_indices: (K,) long tensor of dataset indices
        """
        pass


class AssignmentStrategy(ABC):
    """Abstract base class for point-to-cluster assignment strategies."""

    @abstractmethod
    def compute_assignments(self, points: Tensor, centroid_indices: Tensor,
                            labels: Tensor, metric: DistanceMetric,
                            **kwargs) -> Tuple[Tensor, int]:
        """Reassign points to clusters.

        Args:
            points: (n, d) tensor of data points
            centroid_indices: (K,) dataset indices of the current centroids
            labels: (n,) current cluster assignments
            metric: Active distance metric

        Returns:
            new_labels: (n,) updated cluster assignments
            n_changed: number of points whose cluster changed
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []
