"""Distance metrics for clustering algorithms."""

from .euclidean import EuclideanDistance, WeightedEuclideanDistance
from .callable import CallableDistance, resolve_metric

__all__ = [
    'EuclideanDistance',
    'WeightedEuclideanDistance',
    'CallableDistance',
    'resolve_metric'
]
