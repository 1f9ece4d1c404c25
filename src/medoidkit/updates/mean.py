"""
Mean update strategy for the clustering engine.
"""

from typing import Tuple
import torch
from torch import Tensor


class MeanUpdater:
    """Recomputes cluster means from scratch for the current assignment."""

    def update(self, points: Tensor, labels: Tensor, n_clusters: int) -> Tuple[Tensor, Tensor]:
        """Compute per-cluster means and item counts.

        An empty cluster is divided by one instead of zero and keeps an
        all-zero mean.

        Args:
            points: (n, d) data points
            labels: (n,) current cluster assignments
            n_clusters: Number of clusters K

        Returns:
            means: (K, d) cluster means
            counts: (K,) number of points per cluster
        """
        dimension = points.shape[1]

        means = torch.zeros(n_clusters, dimension, dtype=points.dtype, device=points.device)
        means.index_add_(0, labels, points)

        counts = torch.bincount(labels, minlength=n_clusters)
        means /= counts.clamp(min=1).unsqueeze(1).to(points.dtype)

        return means, counts
