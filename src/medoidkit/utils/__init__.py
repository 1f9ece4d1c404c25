"""Utility functions for the medoidkit engine."""

from .convergence import ChangeInAssignments

from .metrics import (
    pairwise_distances,
    silhouette_score,
    total_distance
)

from .validation import (
    validate_data,
    check_n_clusters,
    check_max_iter,
    check_random_state,
    check_centroid_indices
)

from .device import (
    get_default_device,
    parse_device
)

__all__ = [
    # Convergence criteria
    'ChangeInAssignments',

    # Metrics
    'pairwise_distances',
    'silhouette_score',
    'total_distance',

    # Validation
    'validate_data',
    'check_n_clusters',
    'check_max_iter',
    'check_random_state',
    'check_centroid_indices',

    # Device management
    'get_default_device',
    'parse_device'
]
