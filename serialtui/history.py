"""History of previously sent commands with a selection cursor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class CommandHistory:
    """Unique sent commands, in the order they were first sent."""

    def __init__(self, commands: Iterable[str] = ()) -> None:
        self._commands: list[str] = []
        self._selection = 0
        self._enabled = False
        for command in commands:
            self.add(command)

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def add(self, command: str) -> None:
        if command not in self._commands:
            self._commands.append(command)

    def remove_selected(self) -> None:
        if not self._commands:
            return
        del self._commands[self._selection]
        if self._selection >= len(self._commands) and self._selection > 0:
            self._selection -= 1

    @property
    def selection(self) -> int:
        return self._selection

    def selected(self) -> str:
        """The selected command, or an empty string when there is none."""
        if not self._commands:
            return ""
        return self._commands[self._selection]

    def select_next(self) -> None:
        if self._selection < len(self._commands) - 1:
            self._selection += 1

    def select_previous(self) -> None:
        if self._selection > 0:
            self._selection -= 1

    def toggle_view(self) -> None:
        self._enabled = not self._enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def commands(self) -> list[str]:
        return list(self._commands)