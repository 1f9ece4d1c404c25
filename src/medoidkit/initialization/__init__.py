"""Initialization strategies for the clustering engine."""

from .random import RandomLabelInit
from .from_centroids import FromCentroidIndicesInit

__all__ = [
    'RandomLabelInit',
    'FromCentroidIndicesInit'
]
