"""Selection of the port and baud rate to connect to."""

from __future__ import annotations

from collections.abc import Iterable

from serialtui.port import SerialPort, enumerate_ports

BAUDRATES = (115200, 921600, 9600, 19200, 38400, 57600, 230400, 460800)


class ConfigView:
    """Choices for the port configuration dialog and applying them to a port."""

    def __init__(self, port: SerialPort) -> None:
        self._port = port
        self._ports: list[str] = []
        self._port_index = 0
        self._baudrate_index = 0

    @property
    def ports(self) -> list[str]:
        return list(self._ports)

    @property
    def port_index(self) -> int:
        return self._port_index

    @property
    def baudrate_index(self) -> int:
        return self._baudrate_index

    @property
    def selected_port(self) -> str | None:
        return self._ports[self._port_index] if self._ports else None

    @property
    def selected_baudrate(self) -> int:
        return BAUDRATES[self._baudrate_index]

    def refresh_ports(self, ports: Iterable[str] | None = None) -> None:
        """Reload the port list and preselect the port's current settings."""
        self._ports = list(enumerate_ports() if ports is None else ports)
        if self._port.port_name in self._ports:
            self._port_index = self._ports.index(self._port.port_name)
        elif self._port_index >= len(self._ports):
            self._port_index = 0
        if self._port.baudrate in BAUDRATES:
            self._baudrate_index = BAUDRATES.index(self._port.baudrate)

    def select_port(self, index: int) -> None:
        if not 0 <= index < len(self._ports):
            raise IndexError(f"no port at index {index}")
        self._port_index = index

    def select_baudrate(self, index: int) -> None:
        if not 0 <= index < len(BAUDRATES):
            raise IndexError(f"no baud rate at index {index}")
        self._baudrate_index = index

    def apply(self) -> None:
        """Open the selected port at the selected baud rate."""
        port = self.selected_port
        if port is None:
            raise LookupError("no serial port available")
        self._port.open(port, self.selected_baudrate)