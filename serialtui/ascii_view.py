"""Scrollable log of received and transmitted serial text."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from itertools import islice

DEFAULT_MAX_ROWS = 1024


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SerialData:
    """One row of the log: text received from (or sent to) the port."""

    text: str
    received: bool = True
    time: datetime = field(default_factory=_now)

    @property
    def label(self) -> str:
        return "RX" if self.received else "TX"


def _take_row(text: str, limit: int) -> str:
    """Return the head of ``text``: at most ``limit`` characters, ending at a newline."""
    chunk = text[:limit]
    newline = chunk.find("\n")
    return chunk if newline < 0 else chunk[: newline + 1]


class AsciiView:
    """Holds serial traffic split into display rows and tracks the scroll position."""

    def __init__(self, max_rows: int = DEFAULT_MAX_ROWS) -> None:
        if max_rows < 1:
            raise ValueError("max_rows must be at least 1")
        self._data: deque[SerialData] = deque(maxlen=max_rows)
        self._index = 0
        self._rows_allowed = 0
        self.timestamps = True

    def __len__(self) -> int:
        return len(self._data)

    @property
    def index(self) -> int:
        """Index of the first visible row."""
        return self._index

    @property
    def rows(self) -> tuple[SerialData, ...]:
        return tuple(self._data)

    def render_lines(self) -> list[tuple[bool, str]]:
        """Return ``(received, line)`` for every row currently in view."""
        stop = min(self._index + self._rows_allowed, len(self._data))
        lines = []
        for row in islice(self._data, self._index, stop):
            body = f"[{row.label}] {row.text.rstrip(chr(13) + chr(10))}"
            if self.timestamps:
                stamp = f"{row.time:%H:%M:%S}.{row.time.microsecond // 1000:03d}"
                body = f"{stamp} {body}"
            lines.append((row.received, body))
        return lines

    def parse_bytes(self, data: bytes, width: int) -> None:
        """Append received bytes, wrapping rows at ``width`` characters and newlines."""
        if width < 1:
            raise ValueError("width must be at least 1")
        text = bytes(data).decode("latin-1")
        if self._data:
            last = self._data[-1]
            if last.received and len(last.text) < width and not last.text.endswith("\n"):
                head = _take_row(text, width - len(last.text))
                last.text += head
                text = text[len(head):]
        while text:
            row = _take_row(text, width)
            self._data.append(SerialData(row))
            text = text[len(row):]

    def clear(self) -> None:
        self._data.clear()
        self._index = 0

    def scroll_up(self, count: int) -> None:
        self._index = max(0, self._index - count)

    def scroll_down(self, count: int) -> None:
        if len(self._data) < self._rows_allowed:
            return
        self._index = min(self._index + count, len(self._data) - self._rows_allowed)

    def toggle_timestamps(self) -> None:
        self.timestamps = not self.timestamps

    def reset_view(self, viewable_rows: int) -> None:
        """Set the number of visible rows and scroll to the newest data."""
        self._rows_allowed = viewable_rows
        self._index = max(0, len(self._data) - viewable_rows)

    def add_transmit_message(self, message: str) -> None:
        """Record text sent to the port, continuing an unterminated transmit row."""
        if self._data:
            last = self._data[-1]
            if not last.received and not last.text.endswith("\n"):
                last.text += message
                return
        self._data.append(SerialData(message, received=False))