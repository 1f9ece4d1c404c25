"""
Input validation utilities.

Provides functions for validating data and parameters before clustering,
including data type conversion and sanity checks on the engine arguments.
"""

from typing import Optional, Sequence, Union
import torch
from torch import Tensor
import numpy as np


def validate_data(X: Union[Tensor, np.ndarray, list, tuple],
                  dtype: torch.dtype = torch.float64,
                  device: Optional[torch.device] = None,
                  ensure_2d: bool = True,
                  ensure_finite: bool = False,
                  ensure_min_samples: int = 1,
                  ensure_min_features: int = 1,
                  copy: bool = False) -> Tensor:
    """Validate and convert input data to tensor.

    Args:
        X: Input data (tensor, numpy array, or nested list/tuple)
        dtype: Target data type
        device: Target device
        ensure_2d: Whether to ensure 2D shape
        ensure_finite: Whether to check for inf/nan
        ensure_min_samples: Minimum number of samples required
        ensure_min_features: Minimum number of features required
        copy: Whether to force a copy

    Returns:
        Validated tensor

    Raises:
        ValueError: If validation fails
        TypeError: If X cannot be converted
    """
    # Convert to tensor
    if isinstance(X, Tensor):
        if copy or X.dtype != dtype or (device is not None and X.device != device):
            X = X.to(dtype=dtype, device=device, copy=copy)
    elif isinstance(X, np.ndarray):
        X = torch.from_numpy(np.asarray(X, dtype=np.float64)).to(dtype=dtype, device=device)
    elif isinstance(X, (list, tuple)):
        try:
            X = torch.tensor(X, dtype=dtype, device=device)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Cannot build a numeric matrix from input: {exc}") from exc
    else:
        raise TypeError(f"Cannot convert {type(X)} to tensor")

    # Ensure 2D
    if ensure_2d:
        if X.dim() == 1:
            X = X.unsqueeze(1)
        elif X.dim() != 2:
            raise ValueError(f"Expected 2D array, got {X.dim()}D")

    # Check shape
    if ensure_2d:
        n_samples, n_features = X.shape

        if n_samples < ensure_min_samples:
            raise ValueError(f"Found {n_samples} samples, but need at least "
                             f"{ensure_min_samples}")

        if n_features < ensure_min_features:
            raise ValueError(f"Found {n_features} features, but need at least "
                             f"{ensure_min_features}")

    # Check for finite values
    if ensure_finite:
        if torch.isnan(X).any():
            raise ValueError("Input contains NaN values")
        if torch.isinf(X).any():
            raise ValueError("Input contains infinite values")

    return X


def check_n_clusters(n_clusters: int) -> None:
    """Validate number of clusters.

    Values larger than the number of samples are accepted; the surplus
    clusters simply stay empty.

    Raises:
        TypeError: If not an integer
        ValueError: If smaller than one
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, (int, np.integer)):
        raise TypeError(f"n_clusters must be int, got {type(n_clusters)}")

    if n_clusters < 1:
        raise ValueError(f"n_clusters must be positive, got {n_clusters}")


def check_max_iter(max_iter: int) -> None:
    """Validate the refinement pass budget (zero is allowed)."""
    if isinstance(max_iter, bool) or not isinstance(max_iter, (int, np.integer)):
        raise TypeError(f"max_iter must be int, got {type(max_iter)}")

    if max_iter < 0:
        raise ValueError(f"max_iter must be non-negative, got {max_iter}")


def check_random_state(random_state: Optional[Union[int, np.random.Generator]]) -> np.random.Generator:
    """Create a local generator from a seed.

    Args:
        random_state: Seed, generator, or None (seed 0)

    Returns:
        Generator that does not touch the global NumPy or torch RNG
    """
    if isinstance(random_state, np.random.Generator):
        return random_state

    if random_state is None:
        return np.random.default_rng(0)
    if isinstance(random_state, (int, np.integer)) and not isinstance(random_state, bool):
        return np.random.default_rng(int(random_state))
    raise TypeError(f"random_state must be int or numpy Generator, got {type(random_state)}")


def check_centroid_indices(indices: Sequence[int], n_samples: int,
                           device: Optional[torch.device] = None) -> Tensor:
    """Validate caller supplied centroid indices.

    Args:
        indices: Dataset indices, one per cluster
        n_samples: Number of data points

    Returns:
        (K,) long tensor of indices

    Raises:
        ValueError: If an index is not an integer or out of range
    """
    values = []
    for idx in indices:
        if isinstance(idx, Tensor):
            idx = idx.item()
        if isinstance(idx, bool) or not isinstance(idx, (int, np.integer)):
            raise ValueError(f"Centroid index {idx!r} is not an integer")
        if not 0 <= idx < n_samples:
            raise ValueError(f"Centroid index {idx} out of range for {n_samples} samples")
        values.append(int(idx))

    return torch.tensor(values, dtype=torch.long, device=device)
