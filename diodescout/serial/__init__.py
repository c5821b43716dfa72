"""Serial communication package for DiodeScout UI."""

from .config import SerialConfig
from .parser import LineParser, LineKind, ParserState, ParserStats, ParseResult, transition
from .handler import SerialPortHandler
from .serial_reader import SerialReader

__all__ = [
    "SerialConfig",
    "LineParser",
    "LineKind",
    "ParserState",
    "ParserStats",
    "ParseResult",
    "transition",
    "SerialPortHandler",
    "SerialReader",
]
