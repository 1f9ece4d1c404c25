"""Base classes and interfaces for medoidkit clustering."""

from .interfaces import (
    DistanceMetric,
    InitializationStrategy,
    AssignmentStrategy,
    ConvergenceCriterion
)

from .data_structures import (
    ClusterState,
    AlgorithmState,
    ClusteringResult
)

from .clustering_base import BaseClusteringAlgorithm

__all__ = [
    # Interfaces
    'DistanceMetric',
    'InitializationStrategy',
    'AssignmentStrategy',
    'ConvergenceCriterion',

    # Data structures
    'ClusterState',
    'AlgorithmState',
    'ClusteringResult',

    # Base algorithm
    'BaseClusteringAlgorithm'
]
