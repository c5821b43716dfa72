"""Serial port reader thread for DiodeScout UI.

The thread only moves raw bytes: parsing and the series store live on the
GUI thread, which receives the data through a queued Qt signal. This keeps
the store single-writer without any locking.
"""

from __future__ import annotations

import logging
import traceback

from PySide6 import QtCore

from .config import SerialConfig
from .handler import SerialPortHandler

logger = logging.getLogger(__name__)


class SerialReader(QtCore.QThread):
    """Background thread that reads raw bytes from the serial port.

    Signals:
        bytes_received: Emitted with each non-empty chunk, in arrival order.
        opened: Emitted with the port name once the port is open.
        error: Emitted when an error occurs.
    """

    bytes_received = QtCore.Signal(bytes)
    opened = QtCore.Signal(str)
    error = QtCore.Signal(str)

    def __init__(self, port: str, baud: int = SerialConfig.DEFAULT_BAUD, parent=None):
        super().__init__(parent)
        self._port_handler = SerialPortHandler(port, baud)
        self._running = False

    @property
    def port(self) -> str:
        """Get serial port path."""
        return self._port_handler.port

    def run(self) -> None:
        """Main thread loop: read serial data and forward it."""
        try:
            self._port_handler.open()
        except ConnectionError as e:
            self.error.emit(str(e))
            return

        self.opened.emit(self.port)
        self._running = True

        while self._running:
            try:
                data = self._port_handler.read_available()
                if data:
                    self.bytes_received.emit(bytes(data))
            except (TypeError, OSError) as e:
                if not self._running:
                    break
                logger.error(f"Serial read error on {self.port}: {e}")
                self.error.emit(f"Serial read error: {e}")
                break
            except Exception:
                if not self._running:
                    break
                logger.exception("Unexpected error in serial reader")
                self.error.emit(f"Unexpected error:\n{traceback.format_exc()}")
                break

        self._port_handler.close()

    def stop(self, wait_ms: int = 3000) -> None:
        """Stop the reader thread.

        Args:
            wait_ms: Maximum milliseconds to wait for thread to finish.
        """
        self._running = False
        self.wait(wait_ms)
