"""
Hard assignment strategy for the clustering engine.

Assigns each point to the cluster whose centroid point is nearest under the
active distance metric.
"""

from typing import Tuple
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, DistanceMetric


def centroid_distance_matrix(points: Tensor, centroid_indices: Tensor,
                             metric: DistanceMetric) -> Tensor:
    """Distances from every point to every centroid point.

    Args:
        points: (n, d) data points
        centroid_indices: (K,) dataset indices of the centroids
        metric: Distance metric

    Returns:
        (n, K) distance matrix
    """
    n_points = points.shape[0]
    n_clusters = centroid_indices.shape[0]

    distances = torch.zeros(n_points, n_clusters, dtype=points.dtype, device=points.device)
    for k in range(n_clusters):
        distances[:, k] = metric.compute(points, points[centroid_indices[k]])

    return distances


def nearest_centroids(points: Tensor, centroid_indices: Tensor, labels: Tensor,
                      metric: DistanceMetric) -> Tuple[Tensor, int]:
    """Move every point to its nearest centroid.

    Only a strictly smaller distance wins, so ties go to the lowest cluster
    index. A point with no finite distance to any centroid keeps its label.

    Returns:
        new_labels: (n,) cluster indices
        n_changed: number of points whose label changed
    """
    distances = centroid_distance_matrix(points, centroid_indices, metric)
    distances = torch.nan_to_num(distances, nan=float('inf'))

    # argmin returns the first minimal index
    best = torch.argmin(distances, dim=1)
    best_distances = torch.gather(distances, 1, best.unsqueeze(1)).squeeze(1)
    reachable = best_distances < torch.finfo(distances.dtype).max

    new_labels = torch.where(reachable, best, labels)
    n_changed = int((new_labels != labels).sum().item())

    return new_labels, n_changed


class NearestCentroidAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to the nearest centroid point.

    Centroids are actual data points, so distances are measured between
    observations rather than to computed means.
    """

    def compute_assignments(self, points: Tensor, centroid_indices: Tensor,
                            labels: Tensor, metric: DistanceMetric,
                            **kwargs) -> Tuple[Tensor, int]:
        """Reassign each point to its nearest centroid.

        Args:
            points: (n, d) data points
            centroid_indices: (K,) dataset indices of the current centroids
            labels: (n,) current assignments
            metric: Distance metric

        Returns:
            new_labels: (n,) cluster indices
            n_changed: number of points that moved
        """
        return nearest_centroids(points, centroid_indices, labels, metric)
