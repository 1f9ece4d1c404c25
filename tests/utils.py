# tests/utils.py
"""
Small, reusable helpers used across the medoidkit test suite.

Functions:
- labels_equal_up_to_perm(y1, y2, K): whether two labelings match after relabeling.
- perm_invariant_accuracy(y_pred, split_index): best accuracy over label swap for 2-way splits.
- assert_valid_partition(result, items): every item lands in exactly one group.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
- print_timing(label, seconds, **meta): convenience printer for timings (used by time_block).
"""

from __future__ import annotations

import itertools
import json
import time
from contextlib import contextmanager
from typing import Any, Dict, Sequence

import numpy as np


def labels_equal_up_to_perm(y1: Sequence[int], y2: Sequence[int], K: int) -> bool:
    """Return True if y2 can be relabeled to equal y1 exactly."""
    y1 = np.asarray(y1)
    y2 = np.asarray(y2)
    for perm in itertools.permutations(range(K)):
        mapping = np.array(perm)
        if np.array_equal(y1, mapping[y2]):
            return True
    return False


def perm_invariant_accuracy(y_pred: Sequence[int], split_index: int) -> float:
    """
    Best accuracy over label swaps for 2-way synthetic datasets where the
    first `split_index` points belong to class 0 and the rest to class 1.
    """
    y_pred = np.asarray(y_pred)
    n = y_pred.size
    first = y_pred[:split_index]
    second = y_pred[split_index:]

    acc_a = (np.sum(first == 0) + np.sum(second == 1)) / max(1, n)
    acc_b = (np.sum(first == 1) + np.sum(second == 0)) / max(1, n)

    return float(max(acc_a, acc_b))


def assert_valid_partition(result, items: Sequence[Any]) -> None:
    """Every item appears in exactly one group, in input order within groups."""
    assert sum(result.cluster_sizes) == len(items)
    assert len(result.labels) == len(items)

    seen = []
    for k, group in enumerate(result.clusters):
        expected = [i for i, label in enumerate(result.labels) if label == k]
        assert len(group) == len(expected)
        for item, index in zip(group, expected):
            assert item is items[index]
        seen.extend(expected)

    assert sorted(seen) == list(range(len(items)))


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Output
    ------
    [timing] fit {"n":400,"d":3,"K":2} 0.123s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        print_timing(label, dt, **(meta or {}))


def print_timing(label: str, seconds: float, **meta: Any) -> None:
    """Print timing in a compact, machine-readable single line."""
    meta_str = ""
    if meta:
        meta_str = " " + json.dumps(meta, separators=(",", ":"))
    print(f"[timing] {label}{meta_str} {seconds:.3f}s")
