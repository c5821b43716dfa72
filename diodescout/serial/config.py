"""Serial port configuration for DiodeScout UI."""

from __future__ import annotations


class SerialConfig:
    """Configuration for serial port connection."""
    DEFAULT_BAUD = 9600  # DiodeScout firmware, 8N1, no flow control
    DEFAULT_TIMEOUT = 0.1  # Read timeout in seconds; keeps the thread responsive
    READ_CHUNK_SIZE = 256  # Max bytes taken from the input buffer per read

    START_MARKER = b"*"
    END_MARKER = b"#"
