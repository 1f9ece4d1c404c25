"""
Explicit feature declarations for record types.

A FeatureMap is an ordered list of named accessors, built once per record
type, that reads the numeric features a record contributes to clustering.
Fields are designated up front rather than discovered at clustering time.
"""

import dataclasses
import decimal
import numbers
from operator import attrgetter
from typing import Any, Callable, Iterable, Tuple, Union

import numpy as np
import torch
from torch import Tensor

from ..exceptions import ConfigurationError


FEATURE_METADATA_KEY = 'medoidkit_feature'

Accessor = Callable[[Any], Any]


def feature(**kwargs) -> Any:
    """Declare a dataclass field as a clustering feature.

    Drop-in for ``dataclasses.field``; the field is picked up by
    ``FeatureMap.from_dataclass`` in declaration order.

    Example:
        >>> @dataclass
        ... class City:
        ...     name: str
        ...     lat: float = feature()
        ...     lon: float = feature()
    """
    metadata = dict(kwargs.pop('metadata', None) or {})
    metadata[FEATURE_METADATA_KEY] = True
    return dataclasses.field(metadata=metadata, **kwargs)


def to_real(value: Any, name: str) -> float:
    """Convert a single feature value to float.

    Raises:
        ConfigurationError: If the value is not a real number
    """
    if isinstance(value, (bool, np.bool_)):
        raise ConfigurationError(f"Feature '{name}' has boolean value {value!r}, "
                                 f"which cannot be used as a real number")
    if isinstance(value, (numbers.Real, decimal.Decimal)):
        return float(value)
    if isinstance(value, Tensor) and value.dim() == 0 \
            and value.dtype != torch.bool and not value.is_complex():
        return float(value.item())
    raise ConfigurationError(f"Feature '{name}' has value of type "
                             f"'{type(value).__name__}', which cannot be converted to a real number")


class FeatureMap:
    """Ordered mapping from feature names to accessor functions.

    Args:
        features: Iterable of (name, accessor) pairs. Order defines the
            position of each feature in the resulting vectors.
    """

    def __init__(self, features: Iterable[Tuple[str, Accessor]]):
        self.features = tuple((str(name), accessor) for name, accessor in features)
        if not self.features:
            raise ConfigurationError("FeatureMap needs at least one feature")
        for name, accessor in self.features:
            if not callable(accessor):
                raise ConfigurationError(f"Accessor for feature '{name}' is not callable")

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.features)

    @property
    def dimension(self) -> int:
        return len(self.features)

    def __len__(self) -> int:
        return len(self.features)

    def __repr__(self) -> str:
        return f"FeatureMap({list(self.names)})"

    def read(self, item: Any) -> Tuple[float, ...]:
        """Read every feature of one record as floats.

        Raises:
            ConfigurationError: If an attribute is missing or not numeric
        """
        values = []
        for name, accessor in self.features:
            try:
                raw = accessor(item)
            except AttributeError as exc:
                raise ConfigurationError(
                    f"No public read accessor for feature '{name}' on "
                    f"'{type(item).__name__}'") from exc
            except (KeyError, IndexError, TypeError) as exc:
                raise ConfigurationError(
                    f"Cannot read feature '{name}' from "
                    f"'{type(item).__name__}': {exc!r}") from exc
            values.append(to_real(raw, name))
        return tuple(values)

    @classmethod
    def from_callables(cls, *pairs: Tuple[str, Accessor], **accessors: Accessor) -> 'FeatureMap':
        """Build from explicit accessors, positional pairs first."""
        return cls(list(pairs) + list(accessors.items()))

    @classmethod
    def from_attributes(cls, record_type: type, *names: str) -> 'FeatureMap':
        """Build from public attribute or property names of a record type.

        Args:
            record_type: Class whose instances will be vectorized
            *names: Attribute names, in feature order

        Raises:
            ConfigurationError: If a name is not public or is a property
                without a getter
        """
        features = []
        for name in names:
            _check_public(record_type, name)
            descriptor = getattr(record_type, name, None)
            if isinstance(descriptor, property) and descriptor.fget is None:
                raise ConfigurationError(
                    f"No public getter for property '{name}' on '{record_type.__name__}'. "
                    f"All clustering features must be readable")
            features.append((name, attrgetter(name)))
        return cls(features)

    @classmethod
    def from_dataclass(cls, record_type: type) -> 'FeatureMap':
        """Build from the fields of a dataclass declared with ``feature()``.

        Raises:
            ConfigurationError: If the type is not a dataclass, has no
                designated fields, or designates a non-public field
        """
        if not dataclasses.is_dataclass(record_type):
            raise ConfigurationError(f"'{getattr(record_type, '__name__', record_type)}' "
                                     f"is not a dataclass")
        names = [f.name for f in dataclasses.fields(record_type)
                 if f.metadata.get(FEATURE_METADATA_KEY)]
        if not names:
            raise ConfigurationError(f"Dataclass '{record_type.__name__}' declares no "
                                     f"clustering features; mark fields with feature()")
        return cls.from_attributes(record_type, *names)


def _check_public(record_type: type, name: str) -> None:
    if not name or name.startswith('_'):
        raise ConfigurationError(
            f"No public read accessor for feature '{name}' on '{record_type.__name__}'. "
            f"Clustering features must be public attributes")


FeatureSource = Union[FeatureMap, Iterable[Tuple[str, Accessor]]]
