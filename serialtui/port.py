"""Thread-safe serial port wrapper that buffers incoming bytes."""

from __future__ import annotations

import threading
from collections.abc import Callable
from enum import Enum
from typing import Any

import serial
from serial.tools import list_ports

DEFAULT_BAUDRATE = 115200
WRITE_TIMEOUT = 0.1
BREAK_DURATION = 0.005


class PortError(Enum):
    NONE = ""
    UNABLE_TO_OPEN_PORT = "UnableToOpenPort"
    CANNOT_GET_COMM_STATE = "CannotGetCommState"
    CANNOT_SET_COMM_STATE = "CannotSetCommState"
    CANNOT_SET_COMM_TIMEOUT = "CannotSetCommTimeout"
    CANNOT_GET_COMM_TIMEOUT = "CannotGetCommTimeout"


class SerialPortError(Exception):
    """Raised when a port cannot be opened or configured."""

    def __init__(self, kind: PortError, message: str = "") -> None:
        super().__init__(message or kind.value)
        self.kind = kind


class DataBits(Enum):
    EIGHT = serial.EIGHTBITS
    SEVEN = serial.SEVENBITS
    SIX = serial.SIXBITS
    FIVE = serial.FIVEBITS


class StopBits(Enum):
    ONE = serial.STOPBITS_ONE
    ONE_POINT_FIVE = serial.STOPBITS_ONE_POINT_FIVE
    TWO = serial.STOPBITS_TWO


class Parity(Enum):
    NONE = serial.PARITY_NONE
    ODD = serial.PARITY_ODD
    EVEN = serial.PARITY_EVEN
    MARK = serial.PARITY_MARK
    SPACE = serial.PARITY_SPACE


class SerialPort:
    """A serial connection whose reads are collected for another thread to take."""

    def __init__(self, factory: Callable[..., Any] = serial.Serial) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._handle: Any = None
        self._buffer = bytearray()
        self._error = PortError.NONE
        self.port_name = ""
        self.baudrate = DEFAULT_BAUDRATE
        self.data_bits = DataBits.EIGHT
        self.stop_bits = StopBits.ONE
        self.parity = Parity.NONE

    def __enter__(self) -> SerialPort:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _close_locked(self) -> None:
        if self._handle is not None:
            try:
                self._handle.close()
            finally:
                self._handle = None

    def _fail(self, kind: PortError, exc: Exception) -> SerialPortError:
        self._error = kind
        return SerialPortError(kind, str(exc))

    def open(self, port: str, baudrate: int = DEFAULT_BAUDRATE) -> None:
        """Open ``port``, closing any port already open."""
        with self._lock:
            self._close_locked()
            self.port_name = port
            self.baudrate = baudrate
            try:
                handle = self._factory(
                    port=port,
                    baudrate=baudrate,
                    bytesize=self.data_bits.value,
                    stopbits=self.stop_bits.value,
                    parity=self.parity.value,
                    xonxoff=False,
                    rtscts=False,
                    dsrdtr=False,
                    write_timeout=WRITE_TIMEOUT,
                )
            except ValueError as exc:
                raise self._fail(PortError.CANNOT_SET_COMM_STATE, exc) from exc
            except (serial.SerialException, OSError) as exc:
                raise self._fail(PortError.UNABLE_TO_OPEN_PORT, exc) from exc
            try:
                handle.reset_input_buffer()
                handle.reset_output_buffer()
            except (serial.SerialException, OSError) as exc:
                handle.close()
                raise self._fail(PortError.CANNOT_SET_COMM_STATE, exc) from exc
            self._handle = handle
            self._buffer.clear()
            self._error = PortError.NONE

    def read(self) -> int:
        """Move waiting bytes into the buffer; return how many were read."""
        with self._lock:
            if self._handle is None:
                return 0
            try:
                waiting = self._handle.in_waiting
                if not waiting:
                    return 0
                data = self._handle.read(waiting)
            except (serial.SerialException, OSError):
                self._close_locked()
                return 0
            self._buffer += data
            return len(data)

    def take_bytes(self) -> bytes:
        """Return and empty the buffered bytes."""
        with self._lock:
            if self._handle is None or not self._buffer:
                return b""
            data = bytes(self._buffer)
            self._buffer.clear()
            return data

    def send(self, data: str | bytes) -> bool:
        """Write ``data``; return whether it was written."""
        payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        with self._lock:
            if self._handle is None:
                return False
            try:
                self._handle.write(payload)
            except (serial.SerialException, OSError):
                return False
            return True

    def send_break(self) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.send_break(duration=BREAK_DURATION)

    def close(self) -> None:
        with self._lock:
            self._close_locked()

    @property
    def is_connected(self) -> bool:
        return self._handle is not None

    @property
    def error(self) -> PortError:
        return self._error

    @property
    def last_error(self) -> str:
        return self._error.value


def enumerate_ports() -> list[str]:
    """Names of the serial ports present on this machine."""
    return sorted(info.device for info in list_ports.comports())