"""Reusable UI widgets for DiodeScout UI.

- IVPlotWidget: I-V chart of all stored series
- PortDiscovery: Serial port detection by device marker
"""

from .iv_plot import IVPlotWidget
from .port_discovery import PortDiscovery

__all__ = ['IVPlotWidget', 'PortDiscovery']
