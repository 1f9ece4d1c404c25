"""
Random initialization strategy for the clustering engine.

Draws every point's starting cluster uniformly from [0, K).
"""

from typing import Optional, Tuple, Union
import numpy as np
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy, DistanceMetric
from ..utils.validation import check_random_state


class RandomLabelInit(InitializationStrategy):
    """Seeded uniform random membership.

    Uses a generator local to this strategy, so the same seed always yields
    the same labels and concurrent runs never share random state. Centroids
    start at index 0 for every cluster; the first pass replaces them.
    """

    def __init__(self, random_state: Optional[Union[int, np.random.Generator]] = 0):
        """
        Args:
            random_state: Seed (or generator) for the label draw
        """
        self.random_state = random_state

    def initialize(self, points: Tensor, n_clusters: int,
                   metric: Optional[DistanceMetric] = None,
                   **kwargs) -> Tuple[Tensor, Tensor]:
        """Draw initial labels.

        Args:
            points: (n, d) data points
            n_clusters: Number of clusters
            metric: Unused

        Returns:
            labels: (n,) random cluster indices
            centroid_indices: (K,) zeros
        """
        n_points = points.shape[0]
        generator = check_random_state(self.random_state)

        draw = generator.integers(0, n_clusters, size=n_points)
        labels = torch.as_tensor(draw, dtype=torch.long, device=points.device)
        centroid_indices = torch.zeros(n_clusters, dtype=torch.long, device=points.device)

        return labels, centroid_indices
