"""Main window for DiodeScout UI.

Connects to the DiodeScout over a serial port, feeds received bytes through
the line parser and redraws the I-V chart whenever a series is completed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6 import QtCore, QtWidgets, QtGui

from ..core import AppSettings, SeriesStore
from ..export import TabularImporter, export_script, export_tabular
from ..serial import LineParser, ParseResult, SerialReader
from ..version import __version__, APP_NAME
from .theme import DARK_THEME
from .widgets import IVPlotWidget, PortDiscovery

logger = logging.getLogger(__name__)


class MainWindow(QtWidgets.QMainWindow):
    """Main application window."""

    STOP_TIMEOUT_MS = 3000

    def __init__(self, settings: Optional[AppSettings] = None):
        super().__init__()
        self.settings = settings or AppSettings.load()
        self.store = SeriesStore()
        self.parser = LineParser(self.store)
        self.reader: Optional[SerialReader] = None
        self._port_opened = False

        self._setup_ui()
        self._create_toolbar()

    def _setup_ui(self) -> None:
        self.setWindowTitle(f"{APP_NAME} v{__version__}")
        self.resize(800, 600)

        self.plot_widget = IVPlotWidget(
            DARK_THEME,
            axis_step=self.settings.axis_step,
            show_grid=self.settings.show_grid,
        )
        self.setCentralWidget(self.plot_widget)
        self.statusBar()

    def _create_toolbar(self) -> None:
        toolbar = QtWidgets.QToolBar("Main Toolbar", self)
        toolbar.setIconSize(QtCore.QSize(24, 24))
        self.addToolBar(QtCore.Qt.TopToolBarArea, toolbar)

        self.restore_view_act = toolbar.addAction("Restore default view")
        toolbar.addSeparator()
        self.import_csv_act = toolbar.addAction("Import CSV")
        self.export_csv_act = toolbar.addAction("Export CSV")
        self.export_python_act = toolbar.addAction("Export Python script")
        self.export_png_act = toolbar.addAction("Export PNG")
        toolbar.addSeparator()
        self.remove_last_act = toolbar.addAction("Remove last series")
        self.remove_all_act = toolbar.addAction("Remove all series")
        self.quit_act = toolbar.addAction("Quit")

        self.restore_view_act.triggered.connect(self._restore_view)
        self.import_csv_act.triggered.connect(self._import_csv)
        self.export_csv_act.triggered.connect(self._export_csv)
        self.export_python_act.triggered.connect(self._export_python)
        self.export_png_act.triggered.connect(self._export_png)
        self.remove_last_act.triggered.connect(self._remove_last)
        self.remove_all_act.triggered.connect(self._remove_all)
        self.quit_act.triggered.connect(self.close)

    # -------------------------------------------------------------------------
    # Connection
    # -------------------------------------------------------------------------

    def connect_device(self) -> bool:
        """Find the DiodeScout (or ask for a port) and start reading.

        Returns:
            False if no port was opened.
        """
        port = PortDiscovery.find_device(self.settings.device_marker)
        device = port.device if port is not None else self._ask_for_port()
        if not device:
            return False

        self.reader = SerialReader(device, baud=self.settings.baud_rate)
        self.reader.opened.connect(self._on_opened, QtCore.Qt.QueuedConnection)
        self.reader.bytes_received.connect(self._on_bytes, QtCore.Qt.QueuedConnection)
        self.reader.error.connect(self._on_error, QtCore.Qt.QueuedConnection)
        self.reader.start()

        self.statusBar().showMessage(f"DiodeScout at {PortDiscovery.pretty_name(device)}")
        return True

    def _ask_for_port(self) -> Optional[str]:
        ports = PortDiscovery.get_ports()
        if not ports:
            return None

        labels = [label for _, label in ports]
        choice, ok = QtWidgets.QInputDialog.getItem(
            self, APP_NAME,
            "No DiodeScout device detected.\nPlease select the correct serial port:",
            labels, 0, False,
        )
        if not ok or not choice:
            return None
        return ports[labels.index(choice)][0]

    def _on_opened(self, port: str) -> None:
        self._port_opened = True
        logger.info(f"Reading from {port}")

    def _on_error(self, msg: str) -> None:
        QtWidgets.QMessageBox.critical(self, "Serial Error", msg)
        self.statusBar().showMessage("Disconnected")
        if not self._port_opened:
            # The window is useless without a device
            QtWidgets.QApplication.quit()

    # -------------------------------------------------------------------------
    # Data Handling
    # -------------------------------------------------------------------------

    def _on_bytes(self, data: bytes) -> None:
        for c in data:
            self.handle_serial_byte(c)

    def handle_serial_byte(self, c: int) -> None:
        """Feed one byte to the parser and update the view."""
        result = self.parser.process_received_char(c)
        if result is ParseResult.SERIES_COMPLETED:
            self.statusBar().showMessage("Ready")
            self.plot_widget.rebuild(self.store)
        elif c == 0x0A:
            n = self.store.temporary_series_size()
            self.statusBar().showMessage("Receiving data " + "." * n)

    # -------------------------------------------------------------------------
    # Toolbar actions
    # -------------------------------------------------------------------------

    def _restore_view(self) -> None:
        self.plot_widget.restore_view(self.store)

    def _remove_last(self) -> None:
        self.store.remove_last()
        self.plot_widget.rebuild(self.store)

    def _remove_all(self) -> None:
        self.store.remove_all()
        self.plot_widget.reset_to_empty()

    def _save_path(self, title: str, default_name: str, filter_: str) -> Optional[Path]:
        start_dir = Path(self.settings.export_dir or Path.home())
        path, _ = QtWidgets.QFileDialog.getSaveFileName(
            self, title, str(start_dir / default_name), filter_,
        )
        if not path:
            return None
        self.settings.export_dir = str(Path(path).parent)
        self.settings.save()
        return Path(path)

    def _export_csv(self) -> None:
        path = self._save_path("Export CSV", "dscout.csv", "CSV file (*.csv)")
        if path and not export_tabular(self.store, path):
            QtWidgets.QMessageBox.warning(self, "Error", "CSV export failed.")

    def _export_python(self) -> None:
        path = self._save_path("Export Python script", "dscout.py", "Python script (*.py)")
        if path and not export_script(self.store, path):
            QtWidgets.QMessageBox.warning(self, "Error", "Python export failed.")

    def _export_png(self) -> None:
        path = self._save_path("Export PNG", "dscout.png", "PNG file (*.png)")
        if path and not self.plot_widget.export_png(path):
            QtWidgets.QMessageBox.warning(self, "Error", "PNG export failed.")

    def _import_csv(self) -> None:
        path, _ = QtWidgets.QFileDialog.getOpenFileName(
            self, "Import CSV", self.settings.export_dir or str(Path.home()),
            "CSV Files (*.csv);;All Files (*)",
        )
        if not path:
            return

        try:
            imported = TabularImporter.import_file(Path(path))
        except FileNotFoundError as e:
            QtWidgets.QMessageBox.critical(self, "Error", str(e))
            return
        except ValueError as e:
            QtWidgets.QMessageBox.critical(
                self, "Import Error", f"Could not parse CSV file:\n{e}"
            )
            return

        for series in imported:
            self.store.append_series(series)
        self.plot_widget.rebuild(self.store)
        self.statusBar().showMessage(f"Imported {len(imported)} series from {Path(path).name}")

    # -------------------------------------------------------------------------
    # Cleanup
    # -------------------------------------------------------------------------

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        if self.reader:
            self.reader.stop(self.STOP_TIMEOUT_MS)
        stats = self.parser.stats
        logger.info(
            f"Session: {stats.completed_series} series, {stats.points} points, "
            f"{stats.dropped_lines} dropped lines, "
            f"{stats.discarded_series} discarded series"
        )
        event.accept()
