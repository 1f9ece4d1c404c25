"""
Initialization from caller supplied centroid positions.

Useful for warm starts or when you have good initial guesses; the initial
arrangement of the centroids has a large impact on the final clustering.
"""

from typing import Sequence, Tuple
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy, DistanceMetric
from ..assignments.hard import nearest_centroids
from ..utils.validation import check_centroid_indices


class FromCentroidIndicesInit(InitializationStrategy):
    """Start from K dataset indices used directly as the centroid set.

    Every point joins the cluster of its nearest supplied centroid under the
    active metric.
    """

    def __init__(self, centroid_indices: Sequence[int]):
        """
        Args:
            centroid_indices: One dataset index per cluster
        """
        self.centroid_indices = centroid_indices

    def initialize(self, points: Tensor, n_clusters: int,
                   metric: DistanceMetric, **kwargs) -> Tuple[Tensor, Tensor]:
        """Assign every point to its nearest supplied centroid.

        Args:
            points: (n, d) data points
            n_clusters: Expected number of clusters
            metric: Distance used to find the nearest centroid

        Returns:
            labels: (n,) cluster indices
            centroid_indices: (K,) the supplied indices
        """
        n_points = points.shape[0]
        centroids = check_centroid_indices(self.centroid_indices, n_points, device=points.device)

        if centroids.shape[0] != n_clusters:
            raise ValueError(f"Provided {centroids.shape[0]} centroid indices, "
                             f"but n_clusters={n_clusters}")

        # Points with no finite distance to any centroid start in cluster 0
        start = torch.zeros(n_points, dtype=torch.long, device=points.device)
        labels, _ = nearest_centroids(points, centroids, start, metric)

        return labels, centroids
