"""
Tests for the chart widget, the main window and the reader thread.
"""
import pytest
from PySide6 import QtWidgets

from diodescout.core import AppSettings
from diodescout.serial.serial_reader import SerialReader
from diodescout.ui.main_window import MainWindow
from diodescout.ui.theme import DARK_THEME
from diodescout.ui.widgets import IVPlotWidget


class _FakeHandler:
    """Port handler that fails to open or yields one chunk."""

    def __init__(self, reader, fail=False):
        self.port = "/dev/ttyACM0"
        self.reader = reader
        self.fail = fail
        self.closed = False

    def open(self):
        if self.fail:
            raise ConnectionError("Cannot open /dev/ttyACM0")

    def read_available(self):
        self.reader._running = False
        return b"*\n"

    def close(self):
        self.closed = True


class TestPlotExport:
    """Tests for IVPlotWidget.export_png."""

    @pytest.fixture
    def widget(self, qapp):
        widget = IVPlotWidget(DARK_THEME)
        widget.resize(400, 300)
        return widget

    def test_writes_png(self, widget, tmp_path):
        path = tmp_path / "chart.png"

        assert widget.export_png(path) is True
        assert path.read_bytes().startswith(b"\x89PNG")

    def test_directory_destination_fails(self, widget, tmp_path):
        assert widget.export_png(tmp_path) is False

    def test_missing_parent_directory_fails(self, widget, tmp_path):
        assert widget.export_png(tmp_path / "missing" / "chart.png") is False


class TestMainWindowErrors:
    """Tests for serial error handling in MainWindow."""

    @pytest.fixture
    def quit_calls(self, monkeypatch):
        calls = []
        monkeypatch.setattr(QtWidgets.QMessageBox, "critical", lambda *args: None)
        monkeypatch.setattr(QtWidgets.QApplication, "quit", lambda: calls.append(True))
        return calls

    @pytest.fixture
    def window(self, qapp, quit_calls):
        return MainWindow(AppSettings())

    def test_quits_when_port_never_opened(self, window, quit_calls):
        window._on_error("Cannot open /dev/ttyACM0")

        assert quit_calls == [True]
        assert window.statusBar().currentMessage() == "Disconnected"

    def test_keeps_running_after_port_was_opened(self, window, quit_calls):
        window._on_opened("/dev/ttyACM0")
        window._on_error("Serial read error: device disconnected")

        assert quit_calls == []
        assert window.statusBar().currentMessage() == "Disconnected"

    def test_received_bytes_reach_the_store(self, window):
        window._on_bytes(b"*\n0.5 1.0\n#\n")

        assert window.store.series_count() == 1
        assert window.statusBar().currentMessage() == "Ready"


class TestSerialReader:
    """Tests for the reader thread loop, run synchronously."""

    def setup_method(self):
        self.reader = SerialReader("/dev/ttyACM0")
        self.opened = []
        self.errors = []
        self.chunks = []
        self.reader.opened.connect(self.opened.append)
        self.reader.error.connect(self.errors.append)
        self.reader.bytes_received.connect(self.chunks.append)

    def test_open_failure_emits_error_only(self, qapp):
        self.reader._port_handler = _FakeHandler(self.reader, fail=True)

        self.reader.run()

        assert self.opened == []
        assert self.errors == ["Cannot open /dev/ttyACM0"]

    def test_opened_before_data(self, qapp):
        handler = _FakeHandler(self.reader)
        self.reader._port_handler = handler

        self.reader.run()

        assert self.opened == ["/dev/ttyACM0"]
        assert self.chunks == [b"*\n"]
        assert self.errors == []
        assert handler.closed
