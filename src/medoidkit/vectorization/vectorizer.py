"""
Conversion of caller items into the numeric dataset used by the engine.

Items are either numeric vectors, passed through unchanged, or records read
through a FeatureMap.
"""

import dataclasses
import numbers
from typing import Any, Optional, Sequence

import numpy as np
import torch
from torch import Tensor

from ..exceptions import ConfigurationError
from ..utils.validation import validate_data
from .features import FeatureMap, FeatureSource


class Vectorizer:
    """Turns a sequence of items into an (n, d) float64 tensor.

    Args:
        feature_map: FeatureMap (or iterable of (name, accessor) pairs) used
            for record items. When omitted, numeric items pass through and
            dataclass records are read through their ``feature()`` fields.
        device: Target torch device
    """

    def __init__(self, feature_map: Optional[FeatureSource] = None,
                 device: Optional[torch.device] = None):
        if feature_map is not None and not isinstance(feature_map, FeatureMap):
            feature_map = FeatureMap(feature_map)
        self.feature_map = feature_map
        self.device = device

    def vectorize(self, items: Sequence[Any]) -> Tensor:
        """Build the dataset for ``items``.

        Raises:
            ConfigurationError: If record features cannot be read as reals
            ValueError: If there are no items or the vectors are ragged
        """
        if isinstance(items, (Tensor, np.ndarray)) and self.feature_map is None:
            return validate_data(items, device=self.device)

        items = list(items)
        if not items:
            raise ValueError("Found 0 samples, but need at least 1")

        feature_map = self.feature_map
        if feature_map is None and not _is_numeric_vector(items[0]):
            feature_map = self.feature_map_for(type(items[0]))

        if feature_map is None:
            for i, item in enumerate(items):
                if not _is_numeric_vector(item):
                    raise ConfigurationError(
                        f"Item {i} of type '{type(item).__name__}' is not a numeric "
                        f"vector like the items before it; pass a FeatureMap for records")
            rows = [_as_row(item) for item in items]
        else:
            rows = [feature_map.read(item) for item in items]

        return validate_data(rows, device=self.device)

    __call__ = vectorize

    @staticmethod
    def feature_map_for(record_type: type) -> FeatureMap:
        """Derive a FeatureMap from a record type's declared features."""
        if dataclasses.is_dataclass(record_type):
            return FeatureMap.from_dataclass(record_type)
        raise ConfigurationError(
            f"Items of type '{record_type.__name__}' are not numeric vectors; "
            f"pass a FeatureMap naming their clustering features")


def _is_numeric_vector(item: Any) -> bool:
    if isinstance(item, (Tensor, np.ndarray)):
        return True
    if isinstance(item, numbers.Real) and not isinstance(item, bool):
        return True
    if isinstance(item, (list, tuple)) and not _is_namedtuple(item):
        return all(isinstance(v, numbers.Real) and not isinstance(v, bool) for v in item)
    return False


def _is_namedtuple(item: Any) -> bool:
    return isinstance(item, tuple) and hasattr(item, '_fields')


def _as_row(item: Any):
    if isinstance(item, Tensor):
        return item.detach().to(dtype=torch.float64, device='cpu').reshape(-1).tolist()
    if isinstance(item, np.ndarray):
        return np.asarray(item, dtype=np.float64).reshape(-1).tolist()
    if isinstance(item, numbers.Real):
        return [float(item)]
    return [float(v) for v in item]
