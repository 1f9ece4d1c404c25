"""
Cluster visualization utilities.

Scatter plots of 2D clustering results with the centroid points
highlighted.
"""

from typing import Optional, List, Sequence
import torch
from torch import Tensor
import matplotlib.pyplot as plt
import numpy as np


def plot_clusters_2d(X: Tensor,
                     labels: Tensor,
                     centroid_indices: Optional[Sequence[int]] = None,
                     means: Optional[Tensor] = None,
                     ax: Optional[plt.Axes] = None,
                     colors: Optional[List[str]] = None,
                     alpha: float = 0.7,
                     centroid_marker: str = 'X',
                     mean_marker: str = '+',
                     center_size: int = 200,
                     point_size: int = 50,
                     show_legend: bool = True,
                     title: Optional[str] = None) -> plt.Axes:
    """Plot 2D clustering results.

    Args:
        X: (n, 2) data points
        labels: (n,) cluster labels
        centroid_indices: Optional (k,) indices of the centroid points
        means: Optional (k, 2) cluster means
        ax: Matplotlib axes (created if None)
        colors: List of colors for clusters
        alpha: Point transparency
        centroid_marker: Marker for centroid points
        mean_marker: Marker for means
        center_size: Size of centroid and mean markers
        point_size: Size of data points
        show_legend: Whether to show legend
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    # Convert to numpy for matplotlib
    X_np = torch.as_tensor(X).detach().cpu().numpy()
    labels_np = torch.as_tensor(labels).detach().cpu().numpy()

    if X_np.ndim != 2 or X_np.shape[1] != 2:
        raise ValueError(f"Expected (n, 2) points, got shape {X_np.shape}")

    unique_labels = np.unique(labels_np)
    n_clusters = len(unique_labels)

    # Default colors
    if colors is None:
        cmap = plt.get_cmap('tab10' if n_clusters <= 10 else 'tab20')
        colors = [cmap(i % cmap.N) for i in range(n_clusters)]

    # Plot each cluster
    for i, label in enumerate(unique_labels):
        mask = labels_np == label
        ax.scatter(X_np[mask, 0], X_np[mask, 1],
                   c=[colors[i % len(colors)]],
                   s=point_size,
                   alpha=alpha,
                   edgecolors='black',
                   linewidth=0.5,
                   label=f'Cluster {label}')

    if centroid_indices is not None:
        idx = np.asarray(torch.as_tensor(centroid_indices).cpu().numpy(), dtype=np.int64)
        ax.scatter(X_np[idx, 0], X_np[idx, 1],
                   c='black',
                   marker=centroid_marker,
                   s=center_size,
                   edgecolors='white',
                   linewidth=2,
                   label='Centroids',
                   zorder=10)

    if means is not None:
        means_np = torch.as_tensor(means).detach().cpu().numpy()
        ax.scatter(means_np[:, 0], means_np[:, 1],
                   c='red',
                   marker=mean_marker,
                   s=center_size,
                   linewidth=2,
                   label='Means',
                   zorder=11)

    ax.set_xlabel('Feature 1')
    ax.set_ylabel('Feature 2')

    if title:
        ax.set_title(title)

    if show_legend:
        ax.legend()

    return ax
