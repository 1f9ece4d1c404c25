"""
Clustering evaluation metrics.

Internal metrics (no ground truth needed) for comparing runs with different
seeds or starting centroids. Every function accepts the same distance
argument as the engine.
"""

from typing import Optional
import torch
from torch import Tensor

from ..distances.callable import resolve_metric


def pairwise_distances(X: Tensor, Y: Optional[Tensor] = None,
                       metric=None) -> Tensor:
    """Compute pairwise distances between points.

    Args:
        X: (n, d) first set of points
        Y: (m, d) second set of points (if None, uses X)
        metric: None (Euclidean), DistanceMetric, or callable

    Returns:
        (n, m) distance matrix
    """
    if Y is None:
        Y = X
    metric = resolve_metric(metric)

    distances = torch.zeros(X.shape[0], Y.shape[0], dtype=X.dtype, device=X.device)
    for j in range(Y.shape[0]):
        distances[:, j] = metric.compute(X, Y[j])

    return distances


def total_distance(X: Tensor, labels: Tensor, means: Tensor, metric=None) -> float:
    """Sum of every point's distance to its cluster mean.

    Recomputes the dispersion for an arbitrary assignment, e.g. the final
    labels of a run whose reported total is one pass behind.

    Args:
        X: (n, d) data points
        labels: (n,) cluster labels
        means: (k, d) cluster means

    Returns:
        Total distance (lower is usually better)
    """
    metric = resolve_metric(metric)
    labels = torch.as_tensor(labels, dtype=torch.long, device=X.device)
    return metric.compute(X, means[labels]).sum().item()


def silhouette_score(X: Tensor, labels: Tensor, metric=None) -> float:
    """Compute mean Silhouette Coefficient.

    The Silhouette Coefficient is calculated using the mean intra-cluster
    distance (a) and the mean nearest-cluster distance (b) for each sample.
    The Silhouette Coefficient for a sample is (b - a) / max(a, b).
    Points alone in their cluster score 0.

    Args:
        X: (n, d) data points
        labels: (n,) cluster labels
        metric: None (Euclidean), DistanceMetric, or callable

    Returns:
        Mean silhouette coefficient in [-1, 1]
    """
    labels = torch.as_tensor(labels, dtype=torch.long, device=X.device)
    n_samples = len(X)
    present = torch.unique(labels)

    if len(present) < 2:
        return 0.0

    distances = pairwise_distances(X, metric=metric)
    silhouette_values = torch.zeros(n_samples, dtype=X.dtype, device=X.device)

    for i in range(n_samples):
        same_cluster = labels == labels[i]
        same_cluster[i] = False  # Exclude self

        if same_cluster.sum() == 0:
            continue

        a = distances[i, same_cluster].mean()

        b_values = [distances[i, labels == k].mean()
                    for k in present if k != labels[i]]
        b = torch.stack(b_values).min()

        denom = torch.max(a, b)
        if denom > 0:
            silhouette_values[i] = (b - a) / denom

    return silhouette_values.mean().item()
