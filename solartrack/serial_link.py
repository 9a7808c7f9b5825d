"""Line-oriented access to the tracker's serial port."""

from __future__ import annotations

from typing import Any

import serial


class SerialPortError(OSError):
    """Raised when the serial port cannot be opened, read or written."""


class SerialLink:
    """A serial connection that reads and writes newline-terminated lines.

    ``port`` may be an already-open object with ``read``, ``write`` and
    ``close``; otherwise the named port is opened at 8N1.
    """

    def __init__(self, port_name: str, baud_rate: int = 9600, port: Any = None) -> None:
        self.port_name = port_name
        self.baud_rate = baud_rate
        if port is None:
            try:
                port = serial.Serial(
                    port=port_name,
                    baudrate=baud_rate,
                    bytesize=serial.EIGHTBITS,
                    parity=serial.PARITY_NONE,
                    stopbits=serial.STOPBITS_ONE,
                    timeout=0.06,
                    inter_byte_timeout=0.05,
                    write_timeout=0.05,
                )
            except (serial.SerialException, ValueError) as exc:
                raise SerialPortError(
                    f"cannot open serial port {port_name}: {exc}; check the port name "
                    "and that no other program is using it"
                ) from exc
        self._port = port

    def is_connected(self) -> bool:
        return self._port is not None

    def read_line(self) -> str:
        """Read up to a newline, dropping carriage returns.

        Returns what arrived so far if the port times out first, and an empty
        string when the link is closed.
        """
        if self._port is None:
            return ""
        line = bytearray()
        while True:
            try:
                chunk = self._port.read(1)
            except serial.SerialException as exc:
                raise SerialPortError(f"error reading from {self.port_name}: {exc}") from exc
            if not chunk:
                break
            if chunk == b"\n":
                break
            if chunk != b"\r":
                line += chunk
        return line.decode("utf-8", errors="replace")

    def write_line(self, data: str) -> bool:
        """Write ``data`` and a newline; True when every byte was written."""
        if self._port is None:
            return False
        payload = (data + "\n").encode("utf-8")
        try:
            written = self._port.write(payload)
        except serial.SerialException as exc:
            raise SerialPortError(f"error writing to {self.port_name}: {exc}") from exc
        return written == len(payload)

    def close(self) -> None:
        if self._port is not None:
            port, self._port = self._port, None
            port.close()

    def __enter__(self) -> SerialLink:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()