"""
Base class for clustering algorithms in medoidkit.

Provides the common algorithmic skeleton: vectorize the items, initialize
membership, then alternate an update pass and a reassignment pass until the
assignment stabilizes or the pass budget runs out.
"""

from abc import abstractmethod
from typing import Optional, Dict, Any, List, Sequence, Union
import torch
from torch import Tensor
import numpy as np
import time
import warnings

from .interfaces import (
    DistanceMetric, AssignmentStrategy, InitializationStrategy, ConvergenceCriterion
)
from .data_structures import ClusterState, AlgorithmState, ClusteringResult
from ..distances.callable import resolve_metric
from ..vectorization.features import FeatureSource
from ..vectorization.vectorizer import Vectorizer
from ..utils.device import parse_device
from ..utils.validation import check_n_clusters, check_max_iter


class BaseClusteringAlgorithm:
    """Base class implementing the refinement loop.

    Subclasses need to specify:
    - Initialization strategy
    - Assignment strategy
    - Convergence criterion
    - The update pass (``_update_step``)
    """

    def __init__(self,
                 n_clusters: int,
                 max_iter: int = 100,
                 metric: Optional[Union[DistanceMetric, Any]] = None,
                 feature_map: Optional[FeatureSource] = None,
                 verbose: int = 0,
                 random_state: Optional[int] = 0,
                 device: Optional[Union[str, torch.device]] = None):
        """
        Args:
            n_clusters: Number of clusters K
            max_iter: Maximum refinement passes
            metric: DistanceMetric, callable ``f(a, b) -> float``, or None
                for Euclidean
            feature_map: How to read features from record items
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            random_state: Seed for the random initial assignment
            device: Torch device (None for CPU, 'auto' for best available)
        """
        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.metric = metric
        self.feature_map = feature_map
        self.verbose = verbose
        self.random_state = random_state
        self.device = parse_device(device)

        # These will be set by subclasses
        self.initialization_strategy: Optional[InitializationStrategy] = None
        self.assignment_strategy: Optional[AssignmentStrategy] = None
        self.convergence_criterion: Optional[ConvergenceCriterion] = None

        # Algorithm state
        self.fitted_ = False
        self.n_iter_ = 0
        self.converged_ = False
        self.history_: List[AlgorithmState] = []

    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.

        Subclasses must implement this to instantiate:
        - self.initialization_strategy
        - self.assignment_strategy
        - self.convergence_criterion
        """
        pass

    @abstractmethod
    def _update_step(self, X: Tensor, labels: Tensor, state: ClusterState) -> ClusterState:
        """Recompute cluster parameters for the current assignment.

        Args:
            X: (n, d) data tensor
            labels: (n,) current assignments
            state: Parameters from the previous pass

        Returns:
            New ClusterState
        """
        pass

    def fit(self, items: Sequence[Any], y: Optional[Any] = None) -> 'BaseClusteringAlgorithm':
        """Fit the clustering model.

        Args:
            items: Numeric vectors or records to cluster
            y: Ignored (for sklearn compatibility)

        Returns:
            Self
        """
        return self._fit(items)

    def fit_predict(self, items: Sequence[Any], y: Optional[Any] = None) -> Tensor:
        """Fit and return the final cluster assignments.

        Args:
            items: Numeric vectors or records to cluster
            y: Ignored

        Returns:
            (n,) tensor of cluster assignments
        """
        self._fit(items)
        return self.labels_

    def predict(self, items: Sequence[Any]) -> Tensor:
        """Assign new items to the nearest fitted centroid.

        Args:
            items: Numeric vectors or records of the same shape as the
                fitted data

        Returns:
            (n,) tensor of cluster assignments
        """
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before calling predict")

        X = self._vectorizer().vectorize(items)
        if X.shape[1] != self._data.shape[1]:
            raise ValueError(f"Expected {self._data.shape[1]} features, got {X.shape[1]}")

        centers = self.cluster_centers_
        distances = torch.stack(
            [self.metric_.compute(X, centers[k]) for k in range(self.n_clusters)], dim=1
        )
        distances = torch.nan_to_num(distances, nan=float('inf'))

        return torch.argmin(distances, dim=1)

    def _vectorizer(self) -> Vectorizer:
        return Vectorizer(self.feature_map, device=self.device)

    def _fit(self, items: Sequence[Any]) -> 'BaseClusteringAlgorithm':
        """Internal fit method implementing the refinement loop."""
        check_n_clusters(self.n_clusters)
        check_max_iter(self.max_iter)

        if not isinstance(items, (Tensor, np.ndarray)):
            items = list(items)

        # Validate and prepare data
        X = self._vectorizer().vectorize(items)
        n_points, dimension = X.shape

        self.metric_ = resolve_metric(self.metric)

        # Create algorithm components
        self._create_components()
        self.convergence_criterion.reset()

        if self.verbose:
            print(f"Initializing {self.n_clusters} clusters for {n_points} points...")

        start_time = time.time()
        labels, centroid_indices = self.initialization_strategy.initialize(
            X, self.n_clusters, self.metric_
        )
        state = ClusterState.empty(self.n_clusters, dimension, centroid_indices)

        self.n_iter_ = 0
        self.history_ = []
        converged = False

        # Main refinement loop
        for iteration in range(self.max_iter):
            iter_start_time = time.time()

            # Update step
            state = self._update_step(X, labels, state)

            # Assignment step
            labels, n_changed = self.assignment_strategy.compute_assignments(
                X, state.centroid_indices, labels, self.metric_
            )

            # Check convergence
            converged = self.convergence_criterion.check({
                'iteration': iteration,
                'n_changed': n_changed,
                'n_points': n_points,
                'total_distance': state.total_distance
            })

            self.history_.append(AlgorithmState(
                iteration=iteration,
                cluster_state=state.clone(),
                labels=labels.clone(),
                n_changed=n_changed,
                converged=converged
            ))
            self.n_iter_ = iteration + 1

            # Logging
            iter_time = time.time() - iter_start_time
            if self.verbose >= 2 or (self.verbose >= 1 and iteration % 10 == 0):
                print(f"Iteration {iteration:3d}: total distance = {state.total_distance:.6f}, "
                      f"{n_changed} moved ({iter_time:.3f}s)")

            if converged:
                if self.verbose:
                    print(f"Converged at iteration {iteration}")
                break

        total_time = time.time() - start_time

        if self.verbose:
            if not converged:
                warnings.warn(f"Failed to converge after {self.max_iter} iterations")
            print(f"Total fitting time: {total_time:.3f}s")

        self._data = X
        self.labels_ = labels
        self.cluster_state_ = state
        self.converged_ = converged
        self.result_ = ClusteringResult.from_assignment(
            items, labels, state, n_iter=self.n_iter_, converged=converged
        )
        self.fitted_ = True
        return self

    def _check_fitted(self) -> None:
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")

    @property
    def cluster_centers_(self) -> Tensor:
        """Feature vectors of the centroid points, shape (K, d)."""
        self._check_fitted()
        return self._data[self.cluster_state_.centroid_indices]

    @property
    def centroid_indices_(self) -> Tensor:
        """Dataset index of each cluster's centroid."""
        self._check_fitted()
        return self.cluster_state_.centroid_indices

    @property
    def means_(self) -> Tensor:
        """Cluster means from the last update pass."""
        self._check_fitted()
        return self.cluster_state_.means

    @property
    def total_distance_(self) -> float:
        """Total distance from the last update pass."""
        self._check_fitted()
        return self.cluster_state_.total_distance

    @property
    def inertia_(self) -> float:
        """Alias of ``total_distance_``."""
        return self.total_distance_

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'max_iter': self.max_iter,
            'metric': self.metric,
            'feature_map': self.feature_map,
            'verbose': self.verbose,
            'random_state': self.random_state,
            'device': self.device
        }

    def set_params(self, **params) -> 'BaseClusteringAlgorithm':
        """Set parameters (sklearn compatibility)."""
        for key, value in params.items():
            if key == 'device':
                value = parse_device(value)
            setattr(self, key, value)
        return self
