"""Parameter update strategies for the clustering engine."""

from .mean import MeanUpdater
from .medoid import MedoidSelector

__all__ = [
    'MeanUpdater',
    'MedoidSelector'
]
