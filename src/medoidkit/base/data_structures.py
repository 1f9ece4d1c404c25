"""
Core data structures for the medoidkit clustering engine.

This module provides the containers for per-pass cluster state, the
per-iteration history record, and the immutable result handed back to the
caller.
"""

from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar
import torch
from torch import Tensor
from dataclasses import dataclass, field


T = TypeVar('T')


@dataclass
class ClusterState:
    """Parameters produced by one mean/centroid pass.

    Owned by the engine for the duration of a single run; snapshots are
    cloned before they are stored in history or a result.
    """

    means: Tensor              # (K, d) arithmetic means, zero for empty clusters
    counts: Tensor             # (K,) points assigned per cluster
    centroid_indices: Tensor   # (K,) dataset index of each cluster's medoid
    total_distance: float = 0.0

    n_clusters: int = field(init=False)
    dimension: int = field(init=False)

    def __post_init__(self):
        """Validate shapes and set derived attributes."""
        self.n_clusters, self.dimension = self.means.shape
        assert self.counts.shape == (self.n_clusters,)
        assert self.centroid_indices.shape == (self.n_clusters,)

    @classmethod
    def empty(cls, n_clusters: int, dimension: int,
              centroid_indices: Tensor) -> 'ClusterState':
        """State before any pass has run: zero means and counts."""
        device = centroid_indices.device
        return cls(
            means=torch.zeros(n_clusters, dimension, dtype=torch.float64, device=device),
            counts=torch.zeros(n_clusters, dtype=torch.long, device=device),
            centroid_indices=centroid_indices.clone(),
        )

    @property
    def device(self) -> torch.device:
        """Device where tensors are stored."""
        return self.means.device

    def clone(self) -> 'ClusterState':
        """Detached copy safe to keep after the engine mutates its own."""
        return ClusterState(
            means=self.means.clone(),
            counts=self.counts.clone(),
            centroid_indices=self.centroid_indices.clone(),
            total_distance=self.total_distance,
        )


@dataclass
class AlgorithmState:
    """State of the engine after one refinement pass.

    Used for convergence checking, debugging and the ``history_`` trail.
    """
    iteration: int
    cluster_state: ClusterState
    labels: Tensor
    n_changed: int
    converged: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def total_distance(self) -> float:
        return self.cluster_state.total_distance


@dataclass(frozen=True, eq=False)
class ClusteringResult(Generic[T]):
    """Items arranged into clusters plus the parameters converged on.

    Attributes:
        clusters: One tuple of original items per cluster, in input order
        means: (K, d) final cluster means, mostly useful for debugging
        centroids: Dataset index of each cluster's representative point
        total_distance: Sum of every point's distance to its cluster mean
            at the last mean/centroid pass. Lower is usually better when
            comparing runs with different starting configurations.
        labels: Final cluster index of every input item
        n_iter: Refinement passes performed
        converged: Whether the last pass left every assignment unchanged
    """
    clusters: Tuple[Tuple[T, ...], ...]
    means: Tensor
    centroids: Tuple[int, ...]
    total_distance: float
    labels: Tuple[int, ...] = ()
    n_iter: int = 0
    converged: bool = False

    @classmethod
    def from_assignment(cls, items: Sequence[T], labels: Tensor, state: ClusterState,
                        n_iter: int = 0, converged: bool = False) -> 'ClusteringResult[T]':
        """Group the original items by their final cluster.

        Items keep their input order inside each group; the vectors they were
        built from are not part of the result.
        """
        label_list = [int(label) for label in labels.tolist()]

        groups: List[List[T]] = [[] for _ in range(state.n_clusters)]
        for i, label in enumerate(label_list):
            groups[label].append(items[i])

        return cls(
            clusters=tuple(tuple(group) for group in groups),
            means=state.means.detach().clone().cpu(),
            centroids=tuple(int(idx) for idx in state.centroid_indices.tolist()),
            total_distance=float(state.total_distance),
            labels=tuple(label_list),
            n_iter=n_iter,
            converged=converged,
        )

    @property
    def n_clusters(self) -> int:
        return len(self.clusters)

    @property
    def cluster_sizes(self) -> Tuple[int, ...]:
        return tuple(len(group) for group in self.clusters)

    def centroid_items(self) -> Tuple[Optional[T], ...]:
        """Original item behind each centroid, None for an empty cluster."""
        items = []
        for k, idx in enumerate(self.centroids):
            items.append(self._item_at(idx) if self.cluster_sizes[k] else None)
        return tuple(items)

    def _item_at(self, index: int) -> T:
        label = self.labels[index]
        position = sum(1 for i in range(index) if self.labels[i] == label)
        return self.clusters[label][position]
