"""Low-level serial port handler."""

from __future__ import annotations

import logging
import time
from typing import Optional

import serial

from .config import SerialConfig

logger = logging.getLogger(__name__)


class SerialPortHandler:
    """Handles low-level serial port operations.

    The DiodeScout link is 8N1 without flow control. Data is read as raw
    bytes; line splitting is left to the protocol parser.
    """

    def __init__(self, port: str, baud: int = SerialConfig.DEFAULT_BAUD):
        self.port = port
        self.baud = baud
        self._ser: Optional[serial.Serial] = None

    @property
    def is_open(self) -> bool:
        """Check if port is open."""
        return self._ser is not None and self._ser.is_open

    def open(self) -> None:
        """Open the serial port.

        Raises:
            ConnectionError: If the port cannot be opened.
        """
        try:
            self._ser = serial.Serial(
                self.port,
                self.baud,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                xonxoff=False,
                rtscts=False,
                timeout=SerialConfig.DEFAULT_TIMEOUT,
            )
        except (serial.SerialException, ValueError, OSError) as e:
            self._ser = None
            raise ConnectionError(
                f"Cannot open {self.port}: {e}\n"
                "Check that the device exists and permissions are correct."
            ) from e

        time.sleep(0.1)  # Let port stabilize
        self._ser.reset_input_buffer()  # Flush any old data
        logger.info(f"Opened {self.port} at {self.baud} baud")

    def read_available(self) -> bytes:
        """Read whatever bytes are available.

        Blocks for at most the configured timeout when nothing is waiting.
        Returns an empty bytes object on timeout or if the port is closed.
        """
        if not self._ser:
            return b""
        waiting = self._ser.in_waiting
        size = min(waiting, SerialConfig.READ_CHUNK_SIZE) if waiting else 1
        return self._ser.read(size)

    def close(self) -> None:
        """Close the serial connection."""
        if self._ser:
            try:
                if self._ser.is_open:
                    self._ser.close()
                    logger.info(f"Closed {self.port}")
            except (serial.SerialException, OSError) as e:
                logger.warning(f"Error closing {self.port}: {e}")
            self._ser = None
