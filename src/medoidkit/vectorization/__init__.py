"""Conversion of caller items into feature vectors."""

from .features import FeatureMap, feature, to_real
from .vectorizer import Vectorizer

__all__ = [
    'FeatureMap',
    'feature',
    'to_real',
    'Vectorizer'
]
