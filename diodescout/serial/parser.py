"""Line protocol parser for DiodeScout measurement data.

The device sends one measurement series per button press as plain ASCII
lines terminated by ``\\n`` (``\\r`` is ignored)::

    *                 start of a new series
    * AVCC = 5.02 V   comment / metadata, ignored
    0.412 0.013       data point: voltage [V] and current [mA]
    #                 end of the series

Bytes are buffered until a newline, the trimmed line is classified and fed
through :func:`transition`, a pure function of the parser state. The
resulting action is then applied to the :class:`SeriesStore`. Malformed or
unexpected lines never raise; they are counted in :class:`ParserStats`.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, fields
from enum import Enum, auto
from typing import Optional, Union

from ..core import MeasurementPoint, SeriesStore
from .config import SerialConfig

logger = logging.getLogger(__name__)

# Plain decimal: optional sign, digits with optional fraction, optional exponent
DECIMAL_PATTERN = re.compile(rb"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

NEWLINE = 0x0A
CARRIAGE_RETURN = 0x0D


class ParseResult(Enum):
    """Outcome of feeding one byte to the parser."""
    NOTHING = auto()
    SERIES_COMPLETED = auto()


class ParserState(Enum):
    IDLE = auto()
    RECEIVING = auto()


class LineKind(Enum):
    EMPTY = auto()
    START = auto()
    COMMENT = auto()
    END = auto()
    DATA = auto()


class Action(Enum):
    """Store mutation requested by a transition."""
    NONE = auto()
    START_SERIES = auto()
    APPEND_POINT = auto()
    FINALIZE_SERIES = auto()


@dataclass(frozen=True)
class Transition:
    """Result of processing one complete line."""
    kind: LineKind
    state: ParserState
    action: Action = Action.NONE
    point: Optional[MeasurementPoint] = None
    result: ParseResult = ParseResult.NOTHING
    dropped: bool = False  # Data line received while receiving but not parseable


@dataclass
class ParserStats:
    """Counters describing what happened to received lines.

    Only observational: the parsing outcome does not depend on them.
    """
    lines: int = 0
    comments: int = 0
    points: int = 0
    dropped_lines: int = 0  # Unparseable data lines while receiving
    idle_lines: int = 0  # Data lines and end markers outside a series
    discarded_series: int = 0  # Unfinished series replaced by a new start marker
    empty_series: int = 0  # End markers closing a series without points
    completed_series: int = 0

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, 0)


def classify_line(line: bytes) -> LineKind:
    """Classify an already trimmed line."""
    if not line:
        return LineKind.EMPTY
    if line == SerialConfig.START_MARKER:
        return LineKind.START
    if line.startswith(SerialConfig.START_MARKER):
        return LineKind.COMMENT
    if line == SerialConfig.END_MARKER:
        return LineKind.END
    return LineKind.DATA


def parse_data_line(line: bytes) -> Optional[MeasurementPoint]:
    """Parse ``b"<voltage> <current>"`` into a point.

    Returns:
        The point, or None if the line does not hold exactly two finite
        decimal numbers.
    """
    tokens = line.split()
    if len(tokens) != 2:
        return None
    if not all(DECIMAL_PATTERN.fullmatch(t) for t in tokens):
        return None

    voltage = float(tokens[0])
    current = float(tokens[1])

    if not (math.isfinite(voltage) and math.isfinite(current)):
        return None
    return MeasurementPoint(voltage, current)


def transition(state: ParserState, line: Union[bytes, str],
               has_points: bool) -> Transition:
    """Compute the effect of one received line.

    Args:
        state: Current parser state.
        line: Complete line without its newline terminator.
        has_points: Whether the temporary series already holds points.

    Returns:
        Transition with the next state, the store action and the result.
    """
    if isinstance(line, str):
        line = line.encode('utf-8', errors='replace')
    line = line.strip()
    kind = classify_line(line)

    if kind is LineKind.START:
        # Always restarts, even while already receiving
        return Transition(kind, ParserState.RECEIVING, Action.START_SERIES)

    if kind is LineKind.END:
        if state is ParserState.RECEIVING and has_points:
            return Transition(kind, ParserState.IDLE, Action.FINALIZE_SERIES,
                              result=ParseResult.SERIES_COMPLETED)
        return Transition(kind, state)

    if kind is LineKind.DATA and state is ParserState.RECEIVING:
        point = parse_data_line(line)
        if point is None:
            return Transition(kind, state, dropped=True)
        return Transition(kind, state, Action.APPEND_POINT, point=point)

    return Transition(kind, state)


class LineParser:
    """Byte-at-a-time parser that fills a :class:`SeriesStore`.

    Example:
        >>> parser = LineParser()
        >>> parser.feed(b"*\\n0.5 1.25\\n#\\n")
        1
        >>> parser.store.series_count()
        1
    """

    def __init__(self, store: Optional[SeriesStore] = None):
        self.store = store if store is not None else SeriesStore()
        self.stats = ParserStats()
        self._state = ParserState.IDLE
        self._buffer = bytearray()

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def pending_bytes(self) -> int:
        """Number of buffered bytes of the current, unterminated line."""
        return len(self._buffer)

    def process_received_char(self, c: Union[int, bytes]) -> ParseResult:
        """Process a single received byte.

        Args:
            c: Byte value (0-255) or a bytes object of length one.
        """
        if isinstance(c, (bytes, bytearray)):
            if len(c) != 1:
                raise ValueError(f"Expected a single byte, got {len(c)}")
            c = c[0]

        if c == NEWLINE:
            line = bytes(self._buffer)
            self._buffer.clear()
            return self.handle_line(line)
        if c != CARRIAGE_RETURN:
            self._buffer.append(c)
        return ParseResult.NOTHING

    def feed(self, data: bytes) -> int:
        """Process a chunk of bytes in order.

        Returns:
            Number of series completed by this chunk.
        """
        completed = 0
        for c in data:
            if self.process_received_char(c) is ParseResult.SERIES_COMPLETED:
                completed += 1
        return completed

    def handle_line(self, line: Union[bytes, str]) -> ParseResult:
        """Apply one complete line to the parser state and the store."""
        has_points = not self.store.temporary_series.empty()
        t = transition(self._state, line, has_points)
        self._record(t, has_points, line)

        if t.action is Action.START_SERIES:
            self.store.reset_temporary_series()
        elif t.action is Action.APPEND_POINT:
            self.store.add_point(t.point.voltage, t.point.current)
        elif t.action is Action.FINALIZE_SERIES:
            self.store.finalize_temporary_series()

        self._state = t.state
        return t.result

    def reset(self) -> None:
        """Return to idle and drop any partially received line.

        The store, including its temporary series, is left untouched.
        """
        self._state = ParserState.IDLE
        self._buffer.clear()

    def _record(self, t: Transition, had_points: bool, line) -> None:
        """Update diagnostic counters for a processed line."""
        if t.kind is LineKind.EMPTY:
            return

        stats = self.stats
        stats.lines += 1

        if t.kind is LineKind.COMMENT:
            stats.comments += 1
        elif t.kind is LineKind.START:
            if self._state is ParserState.RECEIVING and had_points:
                stats.discarded_series += 1
                logger.debug("Start marker discarded an unfinished series")
        elif t.action is Action.FINALIZE_SERIES:
            stats.completed_series += 1
        elif t.kind is LineKind.END:
            if self._state is ParserState.RECEIVING:
                stats.empty_series += 1
                logger.debug("Ignoring end marker of an empty series")
            else:
                stats.idle_lines += 1
        elif t.action is Action.APPEND_POINT:
            stats.points += 1
        elif t.dropped:
            stats.dropped_lines += 1
            logger.debug("Dropped malformed data line: %r", line)
        else:
            stats.idle_lines += 1
