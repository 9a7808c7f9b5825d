"""Collects readings from the serial link and shows them on the console."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import Any

from solartrack.plotter import DataPlotter
from solartrack.serial_link import SerialLink, SerialPortError
from solartrack.solardata import SolarHistory, parse_csv_line

HISTORY_SIZE = 100
_COLLECT_INTERVAL = 0.01
_DISPLAY_INTERVAL = 0.1


class Monitor:
    """Runs a collector thread and a display loop until asked to stop."""

    def __init__(self, link: Any, plotter: Any, history: SolarHistory | None = None) -> None:
        self.link = link
        self.plotter = plotter
        self.history = history if history is not None else SolarHistory(HISTORY_SIZE)
        self._stopped = threading.Event()

    @property
    def running(self) -> bool:
        return not self._stopped.is_set()

    def collect(self) -> None:
        """Read lines from the link into the history until stopped."""
        if not self.link.is_connected():
            name = getattr(self.link, "port_name", "")
            print(f"Failed to connect to port {name}", file=sys.stderr)
            self.stop()
            return
        while self.running:
            try:
                line = self.link.read_line()
            except SerialPortError as exc:
                print(exc, file=sys.stderr)
                line = ""
            if line:
                try:
                    sample = parse_csv_line(line)
                except ValueError as exc:
                    print(f"Error parsing data: {exc}", file=sys.stderr)
                else:
                    if sample is not None:
                        self.history.append(sample)
            self._stopped.wait(_COLLECT_INTERVAL)

    def run(self) -> None:
        """Collect in the background and redraw until the plotter asks to quit."""
        collector = threading.Thread(target=self.collect, name="solar-collector", daemon=True)
        collector.start()
        try:
            while self.running:
                self.plotter.display_data(self.history.snapshot())
                if self.plotter.should_quit():
                    self.stop()
                self._stopped.wait(_DISPLAY_INTERVAL)
        except KeyboardInterrupt:
            pass
        finally:
            self.stop()
            collector.join()
        print("Program terminated.")

    def stop(self) -> None:
        self._stopped.set()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="solartrack", description="Show live readings from a solar tracker."
    )
    parser.add_argument("port", nargs="?", help="serial port, e.g. COM3 or /dev/ttyACM0")
    parser.add_argument("--baud", type=int, default=9600, help="baud rate (default 9600)")
    args = parser.parse_args(argv)

    print("Solar Tracker Monitor")
    port = args.port
    if not port:
        port = input(
            "Enter Arduino serial port (e.g., COM3 on Windows, /dev/ttyACM0 on Linux): "
        ).strip()
    if not port:
        print("No serial port given", file=sys.stderr)
        return 1

    try:
        link = SerialLink(port, args.baud)
    except SerialPortError as exc:
        print(f"Failed to connect to port {port}: {exc}", file=sys.stderr)
        return 1

    with link:
        print(f"Connected to Arduino on port {port}")
        Monitor(link, DataPlotter()).run()
    return 0