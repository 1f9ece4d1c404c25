"""
medoidkit: K-means clustering with medoid centroids.

Partitions numeric observations into K groups by iteratively refining a set
of representative points. Centroids are always real items, chosen as the
member nearest to each cluster's mean.

Example usage:
    >>> from medoidkit import cluster
    >>>
    >>> result = cluster([[0, 0], [0, 1], [10, 0], [10, 1]], n_clusters=2,
    ...                  max_iterations=10, initial_centroid_indices=[0, 2])
    >>> result.clusters
    (([0, 0], [0, 1]), ([10, 0], [10, 1]))
    >>> result.centroids
    (0, 2)
"""

__version__ = '0.1.0'

# Import main algorithms
from .algorithms.kmeans import MedoidKMeans, cluster

# Distances
from .distances import EuclideanDistance, WeightedEuclideanDistance, CallableDistance

# Vectorization
from .vectorization import FeatureMap, Vectorizer, feature

# Convenience imports
from .base import (
    ClusteringResult,
    ClusterState,
    DistanceMetric
)
from .exceptions import ConfigurationError

__all__ = [
    # Algorithms
    'MedoidKMeans',
    'cluster',

    # Distances
    'DistanceMetric',
    'EuclideanDistance',
    'WeightedEuclideanDistance',
    'CallableDistance',

    # Vectorization
    'FeatureMap',
    'Vectorizer',
    'feature',

    # Core data structures
    'ClusteringResult',
    'ClusterState',

    # Errors
    'ConfigurationError',

    # Version
    '__version__'
]
