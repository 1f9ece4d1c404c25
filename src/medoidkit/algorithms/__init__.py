"""Clustering algorithms."""

from .kmeans import MedoidKMeans, cluster

__all__ = [
    'MedoidKMeans',
    'cluster'
]
