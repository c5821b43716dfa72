"""Serial port discovery utilities."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from serial.tools import list_ports
from serial.tools.list_ports_common import ListPortInfo

logger = logging.getLogger(__name__)


class PortDiscovery:
    """Serial port discovery utility.

    The DiodeScout identifies itself through its USB descriptor strings, so
    the device is found by looking for a marker in the port's description,
    manufacturer, serial number and device path.
    """

    DEFAULT_MARKER = "DIODESCOUT"

    @staticmethod
    def _comports() -> List[ListPortInfo]:
        try:
            return list(list_ports.comports())
        except (TypeError, ValueError, OSError) as e:
            # pyserial can fail in sandboxed environments (snap/flatpak)
            logger.warning(f"Error listing serial ports: {e}")
            return []

    @staticmethod
    def hardware_text(port: ListPortInfo) -> str:
        """Concatenate all identifying strings of a port."""
        parts = [
            port.description,
            port.manufacturer,
            port.serial_number,
            port.device,
        ]
        return " ".join(p for p in parts if p)

    @classmethod
    def matches(cls, port: ListPortInfo, marker: str = DEFAULT_MARKER) -> bool:
        """Check whether a port carries the device marker (case-insensitive)."""
        return marker.upper() in cls.hardware_text(port).upper()

    @classmethod
    def find_device(cls, marker: str = DEFAULT_MARKER) -> Optional[ListPortInfo]:
        """Return the first port that carries the marker, if any."""
        for port in cls._comports():
            if cls.matches(port, marker):
                logger.info(f"Found device at {port.device}")
                return port
        return None

    @classmethod
    def get_ports(cls) -> List[Tuple[str, str]]:
        """Get list of available serial ports.

        Returns:
            List of tuples (device_name, display_label)
        """
        result = []
        for port in cls._comports():
            desc = port.description or port.hwid or 'Unknown'
            result.append((port.device, f"{port.device}   ({desc})"))
        return result

    @staticmethod
    def pretty_name(device: str) -> str:
        """Strip the Windows device namespace prefix from a port name."""
        return device.replace("\\\\.\\", "")
