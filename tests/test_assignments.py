# tests/test_assignments.py
"""
Reassignment against centroid points.
"""

from __future__ import annotations

import torch

from medoidkit.assignments import NearestCentroidAssignment, centroid_distance_matrix
from medoidkit.distances import EuclideanDistance, CallableDistance


def _X(rows):
    return torch.tensor(rows, dtype=torch.float64)


def test_points_move_to_nearest_centroid():
    X = _X([[0.0], [1.0], [5.0], [6.0]])
    labels = torch.tensor([1, 1, 0, 0])

    new_labels, n_changed = NearestCentroidAssignment().compute_assignments(
        X, torch.tensor([0, 3]), labels, EuclideanDistance()
    )

    assert new_labels.tolist() == [0, 0, 1, 1]
    assert n_changed == 4
    # input labels are not mutated
    assert labels.tolist() == [1, 1, 0, 0]


def test_tie_goes_to_lowest_cluster_index():
    X = _X([[0.0], [2.0], [1.0]])
    labels = torch.tensor([0, 1, 1])

    new_labels, n_changed = NearestCentroidAssignment().compute_assignments(
        X, torch.tensor([0, 1]), labels, EuclideanDistance()
    )

    assert new_labels.tolist() == [0, 1, 0]
    assert n_changed == 1


def test_shared_centroid_point_keeps_everyone_in_first_cluster():
    X = _X([[0.0], [3.0], [9.0]])
    labels = torch.tensor([0, 0, 0])

    new_labels, n_changed = NearestCentroidAssignment().compute_assignments(
        X, torch.tensor([1, 1, 1]), labels, EuclideanDistance()
    )

    assert new_labels.tolist() == [0, 0, 0]
    assert n_changed == 0


def test_unreachable_points_keep_their_label():
    X = _X([[0.0], [1.0]])
    labels = torch.tensor([1, 0])
    metric = CallableDistance(lambda a, b: float("nan"))

    new_labels, n_changed = NearestCentroidAssignment().compute_assignments(
        X, torch.tensor([0, 1]), labels, metric
    )

    assert new_labels.tolist() == [1, 0]
    assert n_changed == 0


def test_distance_matrix_shape():
    X = _X([[0.0, 0.0], [3.0, 4.0], [6.0, 8.0]])
    D = centroid_distance_matrix(X, torch.tensor([0, 2]), EuclideanDistance())
    assert D.shape == (3, 2)
    assert D.tolist() == [[0.0, 10.0], [5.0, 5.0], [10.0, 0.0]]
