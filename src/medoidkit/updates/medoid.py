"""
Medoid selection: nominate a real data point to represent each cluster.
"""

from typing import Tuple
import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


class MedoidSelector:
    """Picks, per cluster, the member closest to the cluster mean.

    The centroid is always an observed point, never the mean itself. The
    same scan accumulates the total distance of every point to its own
    cluster mean.
    """

    def select(self, points: Tensor, labels: Tensor, means: Tensor,
               centroid_indices: Tensor, metric: DistanceMetric) -> Tuple[Tensor, float]:
        """Select new centroids.

        Ties go to the first point in dataset order. A cluster with no
        finite candidate keeps its previous centroid.

        Args:
            points: (n, d) data points
            labels: (n,) current cluster assignments
            means: (K, d) current cluster means
            centroid_indices: (K,) previous centroids
            metric: Distance metric

        Returns:
            centroid_indices: (K,) new centroids
            total_distance: sum of point-to-own-mean distances
        """
        distances = metric.compute(points, means[labels])
        total_distance = distances.sum().item()

        candidates = torch.nan_to_num(distances, nan=float('inf'))
        limit = torch.finfo(candidates.dtype).max

        new_indices = centroid_indices.clone()
        for k in range(means.shape[0]):
            members = torch.nonzero(labels == k, as_tuple=True)[0]
            if members.numel() == 0:
                continue
            member_distances = candidates[members]
            best = torch.argmin(member_distances)
            if member_distances[best] < limit:
                new_indices[k] = members[best]

        return new_indices, total_distance
