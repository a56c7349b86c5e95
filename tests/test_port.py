from types import SimpleNamespace
from unittest.mock import patch

import pytest
import serial

from serialtui.port import (
    DataBits,
    Parity,
    PortError,
    SerialPort,
    SerialPortError,
    StopBits,
    enumerate_ports,
)


class FakeSerial:
    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.incoming = bytearray()
        self.written = bytearray()
        self.breaks = []
        self.closed = False
        self.fail_write = False

    @property
    def in_waiting(self):
        return len(self.incoming)

    def read(self, size):
        data = bytes(self.incoming[:size])
        del self.incoming[:size]
        return data

    def write(self, data):
        if self.fail_write:
            raise serial.SerialTimeoutException("timeout")
        self.written += data
        return len(data)

    def reset_input_buffer(self):
        pass

    def reset_output_buffer(self):
        pass

    def send_break(self, duration=0.25):
        self.breaks.append(duration)

    def close(self):
        self.closed = True


@pytest.fixture
def opened():
    handles = []

    def factory(**kwargs):
        handle = FakeSerial(**kwargs)
        handles.append(handle)
        return handle

    port = SerialPort(factory)
    port.open("COM7", 9600)
    return port, handles


def test_open_passes_settings(opened):
    port, handles = opened
    kwargs = handles[0].kwargs
    assert kwargs["port"] == "COM7"
    assert kwargs["baudrate"] == 9600
    assert kwargs["bytesize"] == DataBits.EIGHT.value
    assert kwargs["stopbits"] == StopBits.ONE.value
    assert kwargs["parity"] == Parity.NONE.value
    assert port.is_connected is True
    assert port.port_name == "COM7"
    assert port.last_error == ""


def test_custom_framing_used():
    handles = []
    port = SerialPort(lambda **kw: handles.append(FakeSerial(**kw)) or handles[-1])
    port.data_bits = DataBits.SEVEN
    port.parity = Parity.EVEN
    port.stop_bits = StopBits.TWO
    port.open("COM1")
    assert handles[0].kwargs["bytesize"] == serial.SEVENBITS
    assert handles[0].kwargs["parity"] == serial.PARITY_EVEN
    assert handles[0].kwargs["stopbits"] == serial.STOPBITS_TWO
    assert handles[0].kwargs["baudrate"] == 115200


def test_read_then_take_bytes(opened):
    port, handles = opened
    handles[0].incoming += b"hello"
    assert port.read() == 5
    handles[0].incoming += b"!"
    port.read()
    assert port.take_bytes() == b"hello!"
    assert port.take_bytes() == b""


def test_read_with_nothing_waiting(opened):
    port, _ = opened
    assert port.read() == 0


def test_send_writes_encoded_text(opened):
    port, handles = opened
    assert port.send("AT\r\n") is True
    assert port.send(b"\x01") is True
    assert bytes(handles[0].written) == b"AT\r\n\x01"


def test_send_failure_reported(opened):
    port, handles = opened
    handles[0].fail_write = True
    assert port.send("x") is False


def test_send_break(opened):
    port, handles = opened
    port.send_break()
    assert len(handles[0].breaks) == 1


def test_reopen_closes_previous(opened):
    port, handles = opened
    port.open("COM8", 9600)
    assert handles[0].closed is True
    assert port.port_name == "COM8"


def test_close(opened):
    port, handles = opened
    port.close()
    assert handles[0].closed is True
    assert port.is_connected is False
    assert port.send("x") is False
    assert port.read() == 0


def test_open_failure_sets_error():
    def factory(**kwargs):
        raise serial.SerialException("missing")

    port = SerialPort(factory)
    with pytest.raises(SerialPortError) as info:
        port.open("COM9")
    assert info.value.kind is PortError.UNABLE_TO_OPEN_PORT
    assert port.last_error == "UnableToOpenPort"
    assert port.is_connected is False


def test_invalid_settings_error():
    def factory(**kwargs):
        raise ValueError("bad baudrate")

    port = SerialPort(factory)
    with pytest.raises(SerialPortError):
        port.open("COM1", -1)
    assert port.error is PortError.CANNOT_SET_COMM_STATE


def test_context_manager_closes(opened):
    port, handles = opened
    with port:
        pass
    assert handles[0].closed is True


def test_enumerate_ports():
    found = [SimpleNamespace(device="COM3"), SimpleNamespace(device="COM1")]
    with patch("serial.tools.list_ports.comports", return_value=found):
        assert enumerate_ports() == ["COM1", "COM3"]