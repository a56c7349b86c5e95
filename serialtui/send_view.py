"""Input line for text to send, with line-ending and case options."""

from __future__ import annotations

from enum import Enum


class LineEnding(Enum):
    CRLF = "\r\n"
    LF = "\n"
    CR = "\r"
    NONE = ""

    @property
    def label(self) -> str:
        return self.name.rjust(4)


_ENDINGS = list(LineEnding)


def _ascii_upper(text: str) -> str:
    return "".join(c.upper() if c.isascii() else c for c in text)


class SendView:
    """The text being typed and how it is turned into bytes to send."""

    def __init__(self) -> None:
        self._text = ""
        self._upper_on_send = False
        self._send_on_type = False
        self._ending = LineEnding.CRLF

    @property
    def text(self) -> str:
        return self._text

    def take_input(self) -> str:
        """Return the text ready to send and clear the input."""
        result = self._text
        if self._upper_on_send:
            result = _ascii_upper(result)
        if not self._send_on_type:
            result += self._ending.value
        self._text = ""
        return result

    def set_input(self, text: str) -> None:
        self._text = text

    def insert(self, text: str) -> bool:
        """Append typed text; report whether the input changed."""
        self._text += text
        return bool(text)

    def backspace(self) -> bool:
        if not self._text:
            return False
        self._text = self._text[:-1]
        return True

    @property
    def line_ending(self) -> str:
        return self._ending.value

    @property
    def line_ending_label(self) -> str:
        return self._ending.label

    @property
    def upper_on_send(self) -> bool:
        return self._upper_on_send

    @property
    def send_on_type(self) -> bool:
        return self._send_on_type

    def toggle_upper_on_send(self) -> None:
        self._upper_on_send = not self._upper_on_send

    def toggle_send_on_type(self) -> None:
        self._send_on_type = not self._send_on_type
        self._text = ""

    def cycle_line_ending(self) -> None:
        position = _ENDINGS.index(self._ending)
        self._ending = _ENDINGS[(position + 1) % len(_ENDINGS)]