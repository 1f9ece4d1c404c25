"""Assignment strategies for the clustering engine."""

from .hard import NearestCentroidAssignment, nearest_centroids, centroid_distance_matrix

__all__ = [
    'NearestCentroidAssignment',
    'nearest_centroids',
    'centroid_distance_matrix'
]
