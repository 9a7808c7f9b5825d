from unittest import mock

import pytest
import serial

from solartrack.serial_link import SerialLink, SerialPortError


class FakePort:
    def __init__(self, incoming=b"", short_write=False, fail=False):
        self.incoming = bytearray(incoming)
        self.written = bytearray()
        self.closed = False
        self.short_write = short_write
        self.fail = fail

    def read(self, n):
        if self.fail:
            raise serial.SerialException("device gone")
        chunk = bytes(self.incoming[:n])
        del self.incoming[:n]
        return chunk

    def write(self, data):
        if self.fail:
            raise serial.SerialException("device gone")
        self.written += data
        return len(data) - 1 if self.short_write else len(data)

    def close(self):
        self.closed = True


def test_read_line_strips_crlf():
    link = SerialLink("COM3", port=FakePort(b"12,34,56\r\n"))
    assert link.read_line() == "12,34,56"


def test_read_consecutive_lines():
    link = SerialLink("COM3", port=FakePort(b"a\nb\r\n"))
    assert [link.read_line(), link.read_line()] == ["a", "b"]


def test_read_partial_line_on_timeout():
    link = SerialLink("COM3", port=FakePort(b"1,2"))
    assert link.read_line() == "1,2"
    assert link.read_line() == ""


def test_read_error_raises():
    link = SerialLink("COM3", port=FakePort(fail=True))
    with pytest.raises(SerialPortError):
        link.read_line()


def test_write_line_appends_newline():
    port = FakePort()
    link = SerialLink("COM3", port=port)
    assert link.write_line("PING") is True
    assert bytes(port.written) == b"PING\n"


def test_short_write_reports_false():
    link = SerialLink("COM3", port=FakePort(short_write=True))
    assert link.write_line("PING") is False


def test_write_error_raises():
    link = SerialLink("COM3", port=FakePort(fail=True))
    with pytest.raises(SerialPortError):
        link.write_line("PING")


def test_closed_link_reads_and_writes_nothing():
    port = FakePort(b"x\n")
    link = SerialLink("COM3", port=port)
    link.close()
    assert port.closed is True
    assert link.is_connected() is False
    assert link.read_line() == ""
    assert link.write_line("x") is False


def test_context_manager_closes_port():
    port = FakePort()
    with SerialLink("COM3", port=port) as link:
        assert link.is_connected() is True
    assert port.closed is True


def test_open_uses_default_settings():
    with mock.patch("serial.Serial") as opener:
        link = SerialLink("COM3")
    kwargs = opener.call_args.kwargs
    assert kwargs["port"] == "COM3"
    assert kwargs["baudrate"] == 9600
    assert kwargs["bytesize"] == serial.EIGHTBITS
    assert kwargs["parity"] == serial.PARITY_NONE
    assert kwargs["stopbits"] == serial.STOPBITS_ONE
    assert link.is_connected() is True


def test_open_failure_raises():
    with mock.patch("serial.Serial", side_effect=serial.SerialException("busy")):
        with pytest.raises(SerialPortError, match="COM9"):
            SerialLink("COM9", 115200)