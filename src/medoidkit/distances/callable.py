"""
Adapter turning a plain two-vector function into a distance metric.

Callers can plug in any ``f(a, b) -> float``; the adapter evaluates it row by
row, handing each pair over as Python lists of floats.
"""

from typing import Callable, List, Optional, Union

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric
from .euclidean import EuclideanDistance


DistanceFunction = Callable[[List[float], List[float]], float]


class CallableDistance(DistanceMetric):
    """Distance metric backed by a user supplied function.

    The function receives two equal-length lists of floats and must return a
    real number. It is called once per (point, target) pair, in dataset order.
    """

    def __init__(self, function: DistanceFunction):
        if not callable(function):
            raise TypeError(f"Distance function must be callable, got {type(function)}")
        self.function = function

    def compute(self, points: Tensor, targets: Tensor, **kwargs) -> Tensor:
        targets = targets.expand_as(points)
        values = [
            float(self.function(point, target))
            for point, target in zip(points.tolist(), targets.tolist())
        ]
        return torch.tensor(values, dtype=points.dtype, device=points.device)

    def __repr__(self) -> str:
        name = getattr(self.function, '__name__', repr(self.function))
        return f"CallableDistance({name})"


def resolve_metric(metric: Optional[Union[DistanceMetric, DistanceFunction]]) -> DistanceMetric:
    """Normalize the ``distance`` argument into a DistanceMetric.

    Args:
        metric: None for Euclidean, a DistanceMetric, or a callable

    Returns:
        DistanceMetric instance
    """
    if metric is None:
        return EuclideanDistance()
    if isinstance(metric, DistanceMetric):
        return metric
    if callable(metric):
        return CallableDistance(metric)
    raise TypeError(f"Distance must be a DistanceMetric or callable, got {type(metric)}")
