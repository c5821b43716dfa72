"""Storage for finalized and in-progress measurement series."""

from __future__ import annotations
from typing import List, Tuple

from .measurement import MeasurementSeries


class SeriesStore:
    """Central storage of measurement series.

    Holds all finalized series in arrival order plus exactly one temporary
    series that is being built while the device is sending data. The
    temporary slot is replaced with a new object on every reset, so a
    reference obtained earlier never sees points of a later series.

    The store is only mutated from the GUI thread (parser, removal and
    import actions), so it carries no locking.
    """

    def __init__(self):
        self._series: List[MeasurementSeries] = []
        self._temporary = MeasurementSeries()

    # -------------------------------------------------------------------------
    # Finalized series
    # -------------------------------------------------------------------------

    def series_count(self) -> int:
        """Number of stored (finalized) series."""
        return len(self._series)

    def series(self, index: int) -> MeasurementSeries:
        """Return a stored series by index.

        Raises:
            IndexError: If index is out of range.
        """
        return self._series[index]

    def all_series(self) -> Tuple[MeasurementSeries, ...]:
        """Snapshot of all stored series in arrival order."""
        return tuple(self._series)

    def remove_all(self) -> None:
        """Remove all stored series. The temporary series is kept."""
        self._series.clear()

    def remove_last(self) -> None:
        """Remove the most recently stored series, if any."""
        if self._series:
            self._series.pop()

    def append_series(self, series: MeasurementSeries) -> bool:
        """Store an already complete series (e.g. read back from a file).

        Returns:
            False if the series is empty and was not stored.
        """
        if series.empty():
            return False
        series.freeze()
        self._series.append(series)
        return True

    # -------------------------------------------------------------------------
    # Temporary series
    # -------------------------------------------------------------------------

    @property
    def temporary_series(self) -> MeasurementSeries:
        return self._temporary

    def temporary_series_size(self) -> int:
        return len(self._temporary)

    def add_point(self, voltage: float, current: float) -> None:
        """Append a point to the temporary series. Values are not validated."""
        self._temporary.add_point(voltage, current)

    def reset_temporary_series(self) -> None:
        """Discard the temporary series and start a new empty one."""
        self._temporary = MeasurementSeries()

    def finalize_temporary_series(self) -> bool:
        """Move the temporary series into the stored list if it has points.

        The temporary slot is reset in any case.

        Returns:
            True if a series was stored.
        """
        finalized = self.append_series(self._temporary)
        self._temporary = MeasurementSeries()
        return finalized

    # -------------------------------------------------------------------------
    # Axis helpers
    # -------------------------------------------------------------------------

    def max_voltage(self) -> float:
        """Maximum voltage across all series (including temporary), or 0.0."""
        max_v = 0.0
        for series in self._iter_all():
            for p in series:
                if p.voltage > max_v:
                    max_v = p.voltage
        return max_v

    def max_current(self) -> float:
        """Maximum current across all series (including temporary), or 0.0."""
        max_i = 0.0
        for series in self._iter_all():
            for p in series:
                if p.current > max_i:
                    max_i = p.current
        return max_i

    def _iter_all(self):
        yield from self._series
        yield self._temporary
