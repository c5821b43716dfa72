"""Core data structures and models for DiodeScout UI."""

from .measurement import MeasurementPoint, MeasurementSeries
from .store import SeriesStore
from .settings import AppSettings

__all__ = [
    'MeasurementPoint',
    'MeasurementSeries',
    'SeriesStore',
    'AppSettings',
]
