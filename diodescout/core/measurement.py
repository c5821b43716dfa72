"""Measurement data structures."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

import numpy as np


@dataclass(frozen=True)
class MeasurementPoint:
    """Single sample on an I-V curve."""
    voltage: float  # Volt (x-value)
    current: float  # Milliampere (y-value)

    def __str__(self) -> str:
        return f"MeasurementPoint(V={self.voltage:.4f}, I={self.current:.4f})"


class MeasurementSeries:
    """Ordered, append-only sequence of measurement points.

    A series is built point by point while the device is sending data and
    frozen once it is stored. Points are never reordered or removed.
    """

    def __init__(self, points: Iterable[MeasurementPoint] = ()):
        self._points: List[MeasurementPoint] = list(points)
        self._frozen = False

    def add_point(self, voltage: float, current: float) -> None:
        """Append a new point at the end of the series.

        Raises:
            ValueError: If the series has already been finalized.
        """
        if self._frozen:
            raise ValueError("Cannot add points to a finalized series")
        self._points.append(MeasurementPoint(voltage, current))

    def freeze(self) -> None:
        """Mark the series as finalized."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def points(self) -> Tuple[MeasurementPoint, ...]:
        """All points in acquisition order."""
        return tuple(self._points)

    def empty(self) -> bool:
        return not self._points

    def voltages(self) -> np.ndarray:
        """Voltage values as a float64 array (plot x-values)."""
        return np.fromiter((p.voltage for p in self._points), dtype=np.float64,
                           count=len(self._points))

    def currents(self) -> np.ndarray:
        """Current values as a float64 array (plot y-values)."""
        return np.fromiter((p.current for p in self._points), dtype=np.float64,
                           count=len(self._points))

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[MeasurementPoint]:
        return iter(tuple(self._points))

    def __getitem__(self, index: int) -> MeasurementPoint:
        return self._points[index]

    def __repr__(self) -> str:
        state = "finalized" if self._frozen else "building"
        return f"MeasurementSeries({len(self._points)} points, {state})"
