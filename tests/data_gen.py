# tests/data_gen.py
"""
Tiny synthetic-data generators reused across the medoidkit test suite.

    >>> X, y = make_blobs([[0, 0], [10, 10]], n_per=50, seed=0)
    >>> X.shape, y.shape
    ((100, 2), (100,))
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple
import numpy as np

NDArray = np.ndarray


def make_blobs(
    centers: Sequence[Sequence[float]],
    n_per: int = 50,
    scale: float = 0.3,
    seed: Optional[int] = None,
) -> Tuple[NDArray, NDArray]:
    """
    Isotropic Gaussian blobs around the given centers.

    Parameters
    ----------
    centers : (K, d) blob centers
    n_per : int, default=50
        Number of points per blob.
    scale : float, default=0.3
        Standard deviation of each blob.
    seed : int or None
        RNG seed for reproducibility.

    Returns
    -------
    X : (K*n_per, d) ndarray, float64
        Rows grouped by blob: first n_per rows from blob 0, and so on.
    y : (K*n_per,) ndarray, int64
        Ground-truth blob index of every row.
    """
    rng = np.random.default_rng(seed)
    centers = np.asarray(centers, dtype=np.float64)
    K, d = centers.shape

    X = np.vstack([c + scale * rng.normal(size=(n_per, d)) for c in centers])
    y = np.repeat(np.arange(K, dtype=np.int64), n_per)

    return X, y


def make_uniform(
    n: int = 60,
    d: int = 2,
    seed: Optional[int] = None,
) -> NDArray:
    """Points drawn uniformly from the unit cube; distinct with probability one."""
    rng = np.random.default_rng(seed)
    return rng.uniform(size=(n, d))
