"""Parsing of labelled tracker telemetry and the status panel built from it."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass

from solartrack.serial_link import SerialLink, SerialPortError

_FLOAT_MAX = 3.4028234663852886e38
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_RE = re.compile(r"[+-]?\d+")

_GREEN = "\033[1;32m"
_RED = "\033[1;31m"
_RESET = "\033[0m"


@dataclass(frozen=True)
class Telemetry:
    """Temperature in degrees Celsius and both servo angles."""

    temperature: float
    horizontal: int
    vertical: int


def _after(part: str, key: str) -> str:
    # A missing key yields the text from just past where "-1" points, as the
    # firmware's monitor always did.
    return part[part.find(key) + len(key):]


def _to_float(text: str) -> float | None:
    text = text.strip()
    if not _FLOAT_RE.fullmatch(text):
        return None
    value = float(text)
    return value if abs(value) <= _FLOAT_MAX else None


def _to_int(text: str) -> int | None:
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    return value if _INT_MIN <= value <= _INT_MAX else None


def parse_telemetry(line: str) -> Telemetry | None:
    """Parse ``TEMP:<t>,HORI:<h>,VERT:<v>``; None if the line does not match."""
    text = line.strip()
    if not ("TEMP" in text and "HORI" in text and "VERT" in text):
        return None
    parts = text.split(",")
    if len(parts) != 3:
        return None
    temperature = _to_float(_after(parts[0], "TEMP:"))
    horizontal = _to_int(_after(parts[1], "HORI:"))
    vertical = _to_int(_after(parts[2], "VERT:"))
    if temperature is None or horizontal is None or vertical is None:
        return None
    return Telemetry(temperature, horizontal, vertical)


class PanelState:
    """The texts a status panel shows for the link and the latest readings."""

    def __init__(self) -> None:
        self.status = "Serial Port: Disconnected"
        self.status_color = "red"
        self.temperature_text = "Temperature: -- °C"
        self.horizontal_text = "Horizontal Servo: -- °"
        self.vertical_text = "Vertical Servo: -- °"

    def set_connected(self, ok: bool) -> None:
        if ok:
            self.status, self.status_color = "Serial Port: Connected", "green"
        else:
            self.status, self.status_color = "Serial Port: Failed to connect", "red"

    def handle_line(self, line: str) -> Telemetry | None:
        """Update the readings from ``line``; return what was parsed, if anything."""
        reading = parse_telemetry(line)
        if reading is not None:
            self.temperature_text = f"Temperature: {reading.temperature:.2f} °C"
            self.horizontal_text = f"Horizontal Servo: {reading.horizontal} °"
            self.vertical_text = f"Vertical Servo: {reading.vertical} °"
        return reading

    def handle_error(self, error: BaseException | None) -> bool:
        """Record a link error; True when the link should be closed."""
        if error is None:
            return False
        self.status, self.status_color = "Serial Port: Error occurred", "red"
        return True


def _render(state: PanelState) -> str:
    color = _GREEN if state.status_color == "green" else _RED
    return "\n".join(
        [
            "LDR Tracker Monitor",
            f"{color}{state.status}{_RESET}",
            state.temperature_text,
            state.horizontal_text,
            state.vertical_text,
            "",
        ]
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="solartrack-panel", description="Show labelled tracker telemetry."
    )
    parser.add_argument("port", nargs="?", default="COM5", help="serial port (default COM5)")
    parser.add_argument("--baud", type=int, default=9600, help="baud rate (default 9600)")
    args = parser.parse_args(argv)

    state = PanelState()
    try:
        link = SerialLink(args.port, args.baud)
    except SerialPortError:
        state.set_connected(False)
        print(_render(state))
        return 1

    state.set_connected(True)
    print(_render(state))
    with link:
        try:
            while True:
                try:
                    line = link.read_line()
                except SerialPortError as exc:
                    if state.handle_error(exc):
                        link.close()
                    print(_render(state))
                    return 1
                if line and state.handle_line(line) is not None:
                    print(_render(state))
        except KeyboardInterrupt:
            return 0