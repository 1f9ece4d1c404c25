# tests/test_vectorizer.py
"""
Vectorization of caller items: numeric pass-through and record features.
"""

from __future__ import annotations

from collections import namedtuple
from dataclasses import dataclass, field
from decimal import Decimal

import numpy as np
import pytest
import torch

from medoidkit import ConfigurationError
from medoidkit.vectorization import FeatureMap, Vectorizer, feature, to_real


@dataclass
class City:
    name: str
    lat: float = feature(default=0.0)
    population: int = field(default=0)
    lon: float = feature(default=0.0)


@dataclass
class Unmarked:
    x: float
    y: float


@dataclass
class Hidden:
    _secret: float = feature(default=0.0)


class WriteOnly:
    def _set(self, value):
        self._x = value

    x = property(fset=_set)


class Reading:
    def __init__(self, value):
        self.value = value


Point = namedtuple("Point", ["x", "y"])


def test_numeric_lists_pass_through():
    X = Vectorizer().vectorize([[0, 0], [0, 1], [10, 0]])
    assert X.dtype == torch.float64
    assert X.shape == (3, 2)
    assert X.tolist() == [[0.0, 0.0], [0.0, 1.0], [10.0, 0.0]]


def test_scalars_become_one_dimensional_vectors():
    X = Vectorizer().vectorize([1, 2.5, 3])
    assert X.shape == (3, 1)


def test_arrays_and_tensors_pass_through():
    arr = np.arange(6, dtype=np.float32).reshape(3, 2)
    assert Vectorizer().vectorize(arr).tolist() == arr.astype(np.float64).tolist()

    t = torch.arange(6, dtype=torch.float32).reshape(3, 2)
    assert torch.equal(Vectorizer().vectorize(t), t.double())

    rows = [np.array([1.0, 2.0]), np.array([3.0, 4.0])]
    assert Vectorizer().vectorize(rows).tolist() == [[1.0, 2.0], [3.0, 4.0]]


def test_dataclass_features_in_declaration_order():
    cities = [City("a", lat=1.0, population=500, lon=2.0), City("b", lat=3.0, lon=4.0)]
    X = Vectorizer().vectorize(cities)
    assert X.tolist() == [[1.0, 2.0], [3.0, 4.0]]


def test_feature_map_from_dataclass_names():
    fmap = FeatureMap.from_dataclass(City)
    assert fmap.names == ("lat", "lon")
    assert len(fmap) == 2


def test_dataclass_without_features_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        Vectorizer().vectorize([Unmarked(1.0, 2.0)])


def test_explicit_feature_map_for_unmarked_dataclass():
    fmap = FeatureMap.from_attributes(Unmarked, "y", "x")
    X = Vectorizer(fmap).vectorize([Unmarked(1.0, 2.0)])
    assert X.tolist() == [[2.0, 1.0]]


def test_non_public_feature_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        FeatureMap.from_dataclass(Hidden)
    with pytest.raises(ConfigurationError):
        FeatureMap.from_attributes(Unmarked, "_x")


def test_property_without_getter_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="getter"):
        FeatureMap.from_attributes(WriteOnly, "x")


def test_missing_attribute_is_a_configuration_error():
    fmap = FeatureMap.from_attributes(Reading, "missing")
    with pytest.raises(ConfigurationError):
        Vectorizer(fmap).vectorize([Reading(1.0)])


def test_non_numeric_value_is_a_configuration_error():
    fmap = FeatureMap.from_attributes(Reading, "value")
    with pytest.raises(ConfigurationError, match="value"):
        Vectorizer(fmap).vectorize([Reading(1.0), Reading("high")])
    with pytest.raises(ConfigurationError):
        Vectorizer(fmap).vectorize([Reading(True)])


def test_numeric_value_types_are_converted():
    fmap = FeatureMap.from_attributes(Reading, "value")
    values = [1, 2.5, Decimal("3.25"), np.int32(4), np.float32(5.5), torch.tensor(6.0)]
    X = Vectorizer(fmap).vectorize([Reading(v) for v in values])
    assert X[:, 0].tolist() == [1.0, 2.5, 3.25, 4.0, 5.5, 6.0]


def test_to_real():
    assert to_real(3, "x") == 3.0
    with pytest.raises(ConfigurationError):
        to_real(None, "x")
    with pytest.raises(ConfigurationError):
        to_real(np.bool_(True), "x")


def test_callable_feature_map_and_pairs():
    fmap = FeatureMap.from_callables(("double", lambda r: 2 * r.value), half=lambda r: r.value / 2)
    assert fmap.names == ("double", "half")
    X = Vectorizer([("double", lambda r: 2 * r.value)]).vectorize([Reading(2.0)])
    assert X.tolist() == [[4.0]]
    assert Vectorizer(fmap).vectorize([Reading(2.0)]).tolist() == [[4.0, 1.0]]


def test_empty_feature_map_is_rejected():
    with pytest.raises(ConfigurationError):
        FeatureMap([])
    with pytest.raises(ConfigurationError):
        FeatureMap([("x", 1.0)])


def test_namedtuple_needs_a_feature_map():
    points = [Point(1.0, 2.0), Point(3.0, 4.0)]
    with pytest.raises(ConfigurationError):
        Vectorizer().vectorize(points)
    X = Vectorizer(FeatureMap.from_attributes(Point, "x", "y")).vectorize(points)
    assert X.tolist() == [[1.0, 2.0], [3.0, 4.0]]


def test_plain_objects_need_a_feature_map():
    with pytest.raises(ConfigurationError):
        Vectorizer().vectorize([Reading(1.0)])


def test_empty_and_ragged_input():
    with pytest.raises(ValueError):
        Vectorizer().vectorize([])
    with pytest.raises(ValueError):
        Vectorizer().vectorize([[1.0, 2.0], [3.0]])


@pytest.mark.parametrize("accessor,item", [
    (lambda r: r["px"], {"py": 1.0}),
    (lambda r: r[3], [1.0]),
    (lambda r: r["px"], 7),
])
def test_failing_accessor_is_a_configuration_error(accessor, item):
    fmap = FeatureMap.from_callables(px=accessor)
    with pytest.raises(ConfigurationError, match="px"):
        Vectorizer(fmap).vectorize([item])


def test_record_after_numeric_items_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="Item 2"):
        Vectorizer().vectorize([[1.0, 2.0], [3.0, 4.0], Reading(5.0)])
    with pytest.raises(ConfigurationError, match="Item 1"):
        Vectorizer().vectorize([1.0, "2.0"])
