"""Terminal front end: key handling, polling and the full-screen loop."""

from __future__ import annotations

import argparse
import asyncio
import sys
import threading
from collections.abc import Sequence
from enum import Enum, auto

from serialtui.ascii_view import AsciiView
from serialtui.config_view import BAUDRATES, ConfigView
from serialtui.history import CommandHistory
from serialtui.paths import history_file, load_history, save_history
from serialtui.port import DEFAULT_BAUDRATE, SerialPort, SerialPortError
from serialtui.send_view import SendView

VERSION = "0.1.0"
FRAME_INTERVAL = 1 / 60
READ_INTERVAL = 0.016
MIN_ROW_CHARS = 80
MIN_TEXT_ROWS = 10

HELP_LINES = (
    " ?    toggle help menu",
    " p    pause with flush",
    " k    scroll up",
    " j    scroll down",
    " K    scroll up 5",
    " J    scroll down 5",
    " :    send mode",
    " C-e  port configuration",
    " C-t  toggle timeStamps",
    " C-p  pause no flush",
    " C-o  clear serial view",
    " ^    (send) view send history",
    " d    (history) remove from history",
    " e    (history) edit from history",
    " C-b  (send) send break state",
    " C-k  (send) toggle touch type",
    " C-u  (send) toggle upper case",
    " C-l  (send) cyle line ending",
)


class TuiState(Enum):
    VIEW = auto()
    SEND = auto()
    CONFIG = auto()
    HISTORY = auto()


def _strip_control(text: str) -> str:
    return "".join(c for c in text if not (ord(c) < 32 or ord(c) == 127))


class Controller:
    """Application state driven by key names and polled serial data."""

    def __init__(
        self,
        port: SerialPort,
        ascii_view: AsciiView,
        send_view: SendView,
        history: CommandHistory,
        config_view: ConfigView,
    ) -> None:
        self.port = port
        self.ascii_view = ascii_view
        self.send_view = send_view
        self.history = history
        self.config_view = config_view
        self.state = TuiState.VIEW
        self.help_active = False
        self.paused = False
        self.transmit_enabled = True
        self.config_field = 0

    def handle_key(self, key: str) -> bool:
        """Act on one key press; return whether it was used."""
        if key == "escape":
            self.state = TuiState.VIEW
            return True
        handlers = {
            TuiState.VIEW: self._view_key,
            TuiState.SEND: self._send_key,
            TuiState.CONFIG: self._config_key,
            TuiState.HISTORY: self._history_key,
        }
        return handlers[self.state](key)

    def _view_key(self, key: str) -> bool:
        if key == "p":
            self.paused = not self.paused
        elif key == "k":
            self.ascii_view.scroll_up(1)
        elif key == "j":
            self.ascii_view.scroll_down(1)
        elif key == "K":
            self.ascii_view.scroll_up(5)
        elif key == "J":
            self.ascii_view.scroll_down(5)
        elif key == "?":
            self.help_active = not self.help_active
        elif key == ":":
            self.state = TuiState.SEND
        elif key == "c-e":
            self.state = TuiState.CONFIG
            self.config_view.refresh_ports()
        elif key == "c-o":
            self.ascii_view.clear()
        elif key == "c-t":
            self.ascii_view.toggle_timestamps()
        return True

    def _send_key(self, key: str) -> bool:
        if key == "enter":
            self._send_line()
        elif key in ("up", "c-h"):
            self.state = TuiState.HISTORY
        elif key == "c-u":
            self.send_view.toggle_upper_on_send()
        elif key == "c-l":
            self.send_view.cycle_line_ending()
        elif key == "c-b":
            self.port.send_break()
        elif key == "c-k":
            self.send_view.toggle_send_on_type()
        elif self._edit(key) and self.send_view.send_on_type:
            self._transmit(self.send_view.take_input())
        return True

    def _edit(self, key: str) -> bool:
        if key == "backspace":
            return self.send_view.backspace()
        if len(key) == 1 and key.isprintable():
            return self.send_view.insert(key)
        return False

    def _send_line(self) -> None:
        to_send = self.send_view.take_input()
        if self.send_view.send_on_type:
            to_send = self.send_view.line_ending
        elif not to_send:
            return
        if self.port.send(to_send) and self.transmit_enabled:
            self.ascii_view.add_transmit_message(to_send)
            if to_send and to_send[0] not in "\r\n":
                self.history.add(_strip_control(to_send))

    def _transmit(self, text: str) -> None:
        self.port.send(text)
        if self.transmit_enabled:
            self.ascii_view.add_transmit_message(text)

    def _history_key(self, key: str) -> bool:
        if key == "d":
            self.history.remove_selected()
        elif key == "e":
            self.send_view.set_input(self.history.selected())
            self.state = TuiState.SEND
        elif key == "enter":
            self.send_view.set_input(self.history.selected())
            self._transmit(self.send_view.take_input())
        elif key in ("up", "k"):
            self.history.select_previous()
        elif key in ("down", "j"):
            self.history.select_next()
        else:
            return False
        return True

    def _config_key(self, key: str) -> bool:
        if key == "tab":
            self.config_field = 1 - self.config_field
        elif key in ("up", "k", "down", "j"):
            self._move_config(-1 if key in ("up", "k") else 1)
        elif key == "enter":
            try:
                self.config_view.apply()
            except (SerialPortError, LookupError):
                pass
        else:
            return False
        return True

    def _move_config(self, step: int) -> None:
        view = self.config_view
        if self.config_field == 0:
            if view.ports:
                view.select_port((view.port_index + step) % len(view.ports))
        else:
            view.select_baudrate((view.baudrate_index + step) % len(BAUDRATES))

    def poll(self, width: int, height: int) -> bool:
        """Move received bytes into the log; return whether any arrived."""
        data = self.port.take_bytes()
        if not data:
            return False
        self.ascii_view.parse_bytes(data, max(width - 2, MIN_ROW_CHARS))
        self.ascii_view.reset_view(max(height - 8, MIN_TEXT_ROWS))
        return True

    def status_text(self) -> str:
        if not self.port.is_connected:
            return "TUI Serial: Not Connected"
        return (
            f"TUI Serial: Connected to {self.port.port_name} @ {self.port.baudrate} "
            f"{self.ascii_view.index}/{len(self.ascii_view)}"
        )


def _render(controller: Controller) -> list[tuple[str, str]]:
    send = controller.send_view
    sending = controller.state is TuiState.SEND
    flag = "reverse fg:ansigreen"
    out: list[tuple[str, str]] = [("", controller.status_text())]
    if sending:
        out.append((flag, " SEND-MODE "))
        if send.upper_on_send:
            out.append((flag, " UPPER "))
        if send.send_on_type:
            out.append((flag, " TOUCH TYPE "))
    if controller.paused:
        out.append(("reverse fg:ansired", " PAUSED "))
    if controller.port.last_error:
        out.append(("fg:ansired", f"  {controller.port.last_error}"))
    out.append(("", "\n"))
    input_style = "fg:ansiwhite" if sending else "fg:ansigray"
    out += [("", "send: "), (input_style, send.text), ("", f" | {send.line_ending_label}\n")]
    out.append(("", "-" * MIN_ROW_CHARS + "\n"))

    if controller.state is TuiState.CONFIG:
        view = controller.config_view
        out.append(("bold", "Port Configuration\n"))
        port = view.selected_port or "(no ports)"
        fields = (f"Port: {port}", f"Baud: {view.selected_baudrate}")
        for position, label in enumerate(fields):
            style = "reverse" if position == controller.config_field else ""
            out.append((style, f" {label} "))
            out.append(("", "\n"))
        out.append(("", " [Apply: Enter]  Tab: field  j/k: change\n"))
    elif controller.state is TuiState.HISTORY:
        out.append(("bold", "Send History\n"))
        for position, command in enumerate(controller.history):
            selected = position == controller.history.selection
            out.append(("reverse" if selected else "", f" {command} "))
            out.append(("", "\n"))
    else:
        for received, line in controller.ascii_view.render_lines():
            out.append(("" if received else "fg:ansicyan", line + "\n"))

    if controller.help_active:
        out.append(("bold", "Help Menu\n"))
        out += [("", line + "\n") for line in HELP_LINES]
    return out


_KEY_ALIASES = {
    "c-m": "enter",
    "c-j": "enter",
    "c-i": "tab",
    "c-h": "backspace",
}


def _run(controller: Controller) -> None:
    from prompt_toolkit.application import Application
    from prompt_toolkit.key_binding import KeyBindings
    from prompt_toolkit.keys import Keys
    from prompt_toolkit.layout import Layout, Window
    from prompt_toolkit.layout.controls import FormattedTextControl

    bindings = KeyBindings()

    @bindings.add("c-c")
    def _quit(event) -> None:
        event.app.exit()

    @bindings.add(Keys.Any)
    def _any(event) -> None:
        key = event.key_sequence[0].key
        name = _KEY_ALIASES.get(key.value, key.value) if isinstance(key, Keys) else key
        controller.handle_key(name)

    window = Window(FormattedTextControl(lambda: _render(controller)), wrap_lines=False)
    app = Application(layout=Layout(window), key_bindings=bindings, full_screen=True)
    app.ttimeoutlen = 0.05

    async def refresh() -> None:
        while True:
            await asyncio.sleep(FRAME_INTERVAL)
            size = app.output.get_size()
            if controller.poll(size.columns, size.rows):
                app.invalidate()

    stop = threading.Event()

    def pump() -> None:
        while not stop.wait(READ_INTERVAL):
            if not controller.paused:
                controller.port.read()

    reader = threading.Thread(target=pump, daemon=True)
    reader.start()
    try:
        app.run(pre_run=lambda: app.create_background_task(refresh()))
    finally:
        stop.set()
        reader.join()


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if "-v" in args or "--version" in args:
        print(f"tui-serial v{VERSION}")
        return 0
    parser = argparse.ArgumentParser(prog="tui-serial", description="Serial terminal.")
    parser.add_argument("port", nargs="?", help="serial port to open")
    parser.add_argument("baudrate", nargs="?", type=int, default=DEFAULT_BAUDRATE)
    options = parser.parse_args(args)

    port = SerialPort()
    if options.port:
        try:
            port.open(options.port, options.baudrate)
        except SerialPortError:
            pass

    store = history_file()
    history = CommandHistory(load_history(store))
    controller = Controller(port, AsciiView(), SendView(), history, ConfigView(port))
    try:
        _run(controller)
    finally:
        save_history(store, history.commands)
        port.close()
    return 0