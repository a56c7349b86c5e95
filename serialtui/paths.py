"""Location and storage of the send history file."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import platformdirs

APP_FOLDER = "tui-serial"
HISTORY_FILE = "history.txt"


def app_data_directory() -> Path:
    """The user's roaming application data directory."""
    return platformdirs.user_data_path(roaming=True)


def history_file() -> Path:
    return app_data_directory() / APP_FOLDER / HISTORY_FILE


def load_history(path: Path) -> list[str]:
    """Read saved commands, one per line; a missing file gives none."""
    path = Path(path)
    if not path.exists():
        return []
    return path.read_text(encoding="utf-8").splitlines()


def save_history(path: Path, commands: Iterable[str]) -> None:
    """Write commands one per line, replacing the file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as handle:
        for command in commands:
            handle.write(f"{command}\n")