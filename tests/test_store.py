"""
Tests for measurement series and the series store.
"""
import numpy as np
import pytest

from diodescout.core import MeasurementPoint, MeasurementSeries, SeriesStore


def _store_with_series(*series_points):
    store = SeriesStore()
    for points in series_points:
        store.reset_temporary_series()
        for v, i in points:
            store.add_point(v, i)
        store.finalize_temporary_series()
    return store


class TestMeasurementSeries:
    """Tests for MeasurementSeries."""

    def test_points_keep_insertion_order(self):
        series = MeasurementSeries()
        series.add_point(0.3, 1.0)
        series.add_point(0.1, 2.0)
        series.add_point(0.2, 3.0)

        assert series.points == (
            MeasurementPoint(0.3, 1.0),
            MeasurementPoint(0.1, 2.0),
            MeasurementPoint(0.2, 3.0),
        )
        assert len(series) == 3
        assert series[1] == MeasurementPoint(0.1, 2.0)

    def test_arrays_for_plotting(self):
        series = MeasurementSeries([MeasurementPoint(0.5, 1.5), MeasurementPoint(0.6, 2.5)])

        np.testing.assert_array_equal(series.voltages(), [0.5, 0.6])
        np.testing.assert_array_equal(series.currents(), [1.5, 2.5])
        assert series.voltages().dtype == np.float64

    def test_empty_arrays(self):
        series = MeasurementSeries()
        assert series.empty()
        assert series.voltages().shape == (0,)

    def test_frozen_series_rejects_points(self):
        series = MeasurementSeries()
        series.add_point(1.0, 1.0)
        series.freeze()

        with pytest.raises(ValueError):
            series.add_point(2.0, 2.0)
        assert len(series) == 1

    def test_points_are_immutable(self):
        point = MeasurementPoint(1.0, 2.0)
        with pytest.raises(AttributeError):
            point.voltage = 3.0


class TestSeriesStore:
    """Tests for SeriesStore."""

    def setup_method(self):
        self.store = SeriesStore()

    def test_new_store_is_empty(self):
        assert self.store.series_count() == 0
        assert self.store.all_series() == ()
        assert self.store.temporary_series_size() == 0

    def test_add_point_goes_to_temporary_series(self):
        self.store.add_point(0.5, 1.0)
        self.store.add_point(-3.0, 1e9)  # No range validation

        assert self.store.temporary_series_size() == 2
        assert self.store.series_count() == 0

    def test_finalize_moves_non_empty_series(self):
        self.store.add_point(0.5, 1.0)
        temporary = self.store.temporary_series

        assert self.store.finalize_temporary_series() is True
        assert self.store.series_count() == 1
        assert self.store.series(0) is temporary
        assert temporary.frozen
        assert self.store.temporary_series is not temporary
        assert self.store.temporary_series_size() == 0

    def test_finalize_empty_series_is_noop(self):
        assert self.store.finalize_temporary_series() is False
        assert self.store.series_count() == 0

    def test_reset_replaces_temporary_series(self):
        self.store.add_point(1.0, 1.0)
        old = self.store.temporary_series

        self.store.reset_temporary_series()
        self.store.add_point(2.0, 2.0)

        # A reference held across the reset keeps its own points
        assert old.points == (MeasurementPoint(1.0, 1.0),)
        assert self.store.temporary_series.points == (MeasurementPoint(2.0, 2.0),)

    def test_remove_last_on_empty_store(self):
        self.store.remove_last()
        assert self.store.series_count() == 0

    def test_remove_last_keeps_order(self):
        store = _store_with_series([(1.0, 1.0)], [(2.0, 2.0)], [(3.0, 3.0)])

        store.remove_last()

        assert store.series_count() == 2
        assert store.series(0)[0].voltage == 1.0
        assert store.series(1)[0].voltage == 2.0

    def test_remove_all_keeps_temporary_series(self):
        store = _store_with_series([(1.0, 1.0)], [(2.0, 2.0)])
        store.add_point(9.0, 9.0)

        store.remove_all()

        assert store.series_count() == 0
        assert store.temporary_series_size() == 1

    def test_all_series_is_a_snapshot(self):
        store = _store_with_series([(1.0, 1.0)])
        snapshot = store.all_series()

        store.remove_all()

        assert len(snapshot) == 1

    def test_append_series(self):
        series = MeasurementSeries([MeasurementPoint(1.0, 2.0)])

        assert self.store.append_series(series) is True
        assert self.store.append_series(MeasurementSeries()) is False
        assert self.store.series_count() == 1
        assert series.frozen

    def test_max_values_without_points(self):
        assert self.store.max_voltage() == 0.0
        assert self.store.max_current() == 0.0

    def test_max_values_include_temporary_series(self):
        store = _store_with_series([(0.7, 3.0), (0.2, 12.5)], [(1.4, 8.0)])
        assert store.max_voltage() == 1.4
        assert store.max_current() == 12.5

        store.add_point(2.2, 20.0)
        assert store.max_voltage() == 2.2
        assert store.max_current() == 20.0

    def test_max_values_never_below_zero(self):
        store = _store_with_series([(-1.0, -5.0), (-0.5, -2.0)])
        assert store.max_voltage() == 0.0
        assert store.max_current() == 0.0
