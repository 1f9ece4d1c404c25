"""
K-means with medoid centroids.

Partitions items into K clusters by alternating a mean pass, which also
nominates the member closest to each mean as the cluster's centroid, and a
reassignment pass against those centroid points.
"""

from typing import Any, Optional, Sequence, Union
import warnings
import torch
from torch import Tensor

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.data_structures import ClusterState, ClusteringResult
from ..base.interfaces import DistanceMetric
from ..assignments.hard import NearestCentroidAssignment
from ..initialization.random import RandomLabelInit
from ..initialization.from_centroids import FromCentroidIndicesInit
from ..updates.mean import MeanUpdater
from ..updates.medoid import MedoidSelector
from ..utils.convergence import ChangeInAssignments
from ..vectorization.features import FeatureSource


class MedoidKMeans(BaseClusteringAlgorithm):
    """K-means whose centroids are always actual data points.

    Each refinement pass computes the arithmetic mean of every cluster,
    picks the cluster member nearest to that mean as its centroid, then
    moves every point to the cluster of its nearest centroid. The loop stops
    when no point moves or after ``max_iter`` passes.

    Parameters
    ----------
    n_clusters : int
        Number of clusters. Values larger than the number of items are
        accepted and leave some clusters empty.
    max_iter : int, default=100
        Maximum number of refinement passes
    metric : DistanceMetric or callable, optional
        Distance between two vectors; Euclidean when omitted. A callable
        receives two lists of floats and returns a float.
    random_state : int, default=0
        Seed for the random initial assignment. Same seed, same result.
    initial_centroid_indices : sequence of int, optional
        One item index per cluster used as the starting centroids; every
        item then starts in the cluster of its nearest centroid and
        ``random_state`` has no effect. A sequence whose length differs from
        ``n_clusters`` is ignored with a warning and random initialization
        is used.
    feature_map : FeatureMap, optional
        How to read numeric features from record items
    verbose : int, default=0
        Verbosity level
    device : str or torch.device, optional
        Device for computation

    Attributes
    ----------
    labels_ : Tensor of shape (n_samples,)
        Final cluster of every item
    means_ : Tensor of shape (n_clusters, n_features)
        Cluster means from the last pass (zero for empty clusters)
    centroid_indices_ : Tensor of shape (n_clusters,)
        Item index of each cluster's centroid
    cluster_centers_ : Tensor of shape (n_clusters, n_features)
        Feature vectors of the centroids
    total_distance_ : float
        Sum of point-to-mean distances at the last pass
    n_iter_ : int
        Number of passes run
    converged_ : bool
        Whether the last pass moved no point
    result_ : ClusteringResult
        Items grouped by cluster
    """

    def __init__(self,
                 n_clusters: int,
                 max_iter: int = 100,
                 metric: Optional[Union[DistanceMetric, Any]] = None,
                 random_state: Optional[int] = 0,
                 initial_centroid_indices: Optional[Sequence[int]] = None,
                 feature_map: Optional[FeatureSource] = None,
                 verbose: int = 0,
                 device: Optional[Union[str, torch.device]] = None):
        """Initialize the algorithm."""
        super().__init__(
            n_clusters=n_clusters,
            max_iter=max_iter,
            metric=metric,
            feature_map=feature_map,
            verbose=verbose,
            random_state=random_state,
            device=device
        )
        self.initial_centroid_indices = initial_centroid_indices

    def _create_components(self) -> None:
        """Create the medoid k-means components."""
        self.assignment_strategy = NearestCentroidAssignment()
        self.update_strategy = MeanUpdater()
        self.selection_strategy = MedoidSelector()

        # Initialization
        indices = self.initial_centroid_indices
        if indices is not None and len(indices) == self.n_clusters:
            self.initialization_strategy = FromCentroidIndicesInit(indices)
        else:
            if indices is not None:
                warnings.warn(f"Ignoring {len(indices)} initial centroid indices for "
                              f"n_clusters={self.n_clusters}; using random initialization")
            self.initialization_strategy = RandomLabelInit(self.random_state)

        # Convergence criterion
        self.convergence_criterion = ChangeInAssignments()

    def _update_step(self, X: Tensor, labels: Tensor, state: ClusterState) -> ClusterState:
        """Mean pass followed by medoid selection."""
        means, counts = self.update_strategy.update(X, labels, self.n_clusters)
        centroid_indices, total_distance = self.selection_strategy.select(
            X, labels, means, state.centroid_indices, self.metric_
        )
        return ClusterState(
            means=means,
            counts=counts,
            centroid_indices=centroid_indices,
            total_distance=total_distance
        )

    def get_params(self, deep: bool = True):
        params = super().get_params(deep)
        params['initial_centroid_indices'] = self.initial_centroid_indices
        return params


def cluster(items: Sequence[Any],
            n_clusters: int,
            max_iterations: int = 100,
            distance: Optional[Union[DistanceMetric, Any]] = None,
            seed: int = 0,
            initial_centroid_indices: Optional[Sequence[int]] = None,
            feature_map: Optional[FeatureSource] = None,
            verbose: int = 0) -> ClusteringResult:
    """Cluster items into ``n_clusters`` groups.

    Args:
        items: Numeric vectors (lists, arrays, tensors) or records exposing
            numeric features through ``feature_map`` or ``feature()`` fields
        n_clusters: Desired number of clusters
        max_iterations: Maximum number of refinement passes
        distance: Custom distance; Euclidean when omitted
        seed: Seed for the random initial arrangement
        initial_centroid_indices: Starting centroids as indices into
            ``items``; overrides ``seed`` when its length equals
            ``n_clusters``
        feature_map: How to read features from record items
        verbose: Verbosity level

    Returns:
        ClusteringResult with the items arranged into clusters, the final
        means and centroids, and the total distance

    Raises:
        ConfigurationError: If record features cannot be read as numbers
    """
    model = MedoidKMeans(
        n_clusters=n_clusters,
        max_iter=max_iterations,
        metric=distance,
        random_state=seed,
        initial_centroid_indices=initial_centroid_indices,
        feature_map=feature_map,
        verbose=verbose
    )
    model.fit(items)
    return model.result_
