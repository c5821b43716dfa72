"""I-V curve plot widget."""

from __future__ import annotations
import math
from datetime import datetime
from pathlib import Path
from typing import Union

import pyqtgraph as pg

from ...core import SeriesStore
from ..theme import ThemeColors

EMPTY_TITLE = "Press the button on the DiodeScout ..."


def round_up_to_step(value: float, step: float = 0.5) -> float:
    """Round a value up to the next multiple of step."""
    return math.ceil(value / step) * step


class IVPlotWidget(pg.PlotWidget):
    """Plot of all stored series as current over voltage.

    The chart is rebuilt from the store whenever a series is completed or
    removed; there is no incremental drawing of the series in progress.
    """

    def __init__(self, theme: ThemeColors, axis_step: float = 0.5,
                 show_grid: bool = True, parent=None):
        super().__init__(parent)
        self.theme = theme
        self.axis_step = axis_step
        self._show_grid = show_grid

        pg.setConfigOptions(antialias=True)
        self.setBackground(theme.chart_background)
        self._style_axes()
        self.reset_to_empty()

    def _style_axes(self) -> None:
        plot = self.getPlotItem()
        for name in ('left', 'bottom'):
            axis = plot.getAxis(name)
            axis.setTextPen(self.theme.chart_axis)
            axis.setPen(self.theme.chart_axis)
        plot.setLabel('bottom', "Volt (V)")
        plot.setLabel('left', "Milliampere (mA)")
        plot.showGrid(x=self._show_grid, y=self._show_grid, alpha=0.2)

    def set_grid(self, show: bool) -> None:
        self._show_grid = show
        self.getPlotItem().showGrid(x=show, y=show, alpha=0.2)

    def reset_to_empty(self) -> None:
        """Remove all curves and show the placeholder title."""
        plot = self.getPlotItem()
        plot.clear()
        plot.setTitle(EMPTY_TITLE, color=self.theme.chart_axis, size='12pt')
        plot.hideAxis('left')
        plot.hideAxis('bottom')

    def rebuild(self, store: SeriesStore) -> None:
        """Redraw all stored series and rescale the axes."""
        if store.series_count() == 0:
            self.reset_to_empty()
            return

        plot = self.getPlotItem()
        plot.clear()
        plot.showAxis('left')
        plot.showAxis('bottom')

        colors = self.theme.chart_series
        for index, series in enumerate(store.all_series()):
            pen = pg.mkPen(colors[index % len(colors)], width=2)
            plot.plot(series.voltages(), series.currents(), pen=pen)

        title = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        plot.setTitle(title, color=self.theme.chart_axis, size='12pt')
        self._apply_ranges(store)

    def _apply_ranges(self, store: SeriesStore) -> None:
        step = self.axis_step
        x_max = round_up_to_step(store.max_voltage(), step) or step
        y_max = round_up_to_step(store.max_current(), step) or step

        plot = self.getPlotItem()
        plot.setXRange(0, x_max, padding=0)
        plot.setYRange(0, y_max, padding=0)
        # Major ticks every step, minor ticks every fifth of a step
        plot.getAxis('bottom').setTickSpacing(step, step / 5)
        plot.getAxis('left').setTickSpacing(step, step / 5)

    def restore_view(self, store: SeriesStore) -> None:
        """Undo user zoom/pan."""
        if store.series_count() > 0:
            self._apply_ranges(store)

    def export_png(self, filepath: Union[str, Path]) -> bool:
        """Render the chart to a PNG file.

        Returns:
            False if the image could not be written.
        """
        pixmap = self.grab()
        return pixmap.save(str(filepath), "PNG")
