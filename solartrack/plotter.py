"""Console display of the latest solar tracker readings."""

from __future__ import annotations

import os
import sys
from datetime import datetime
from typing import Callable, Optional, Sequence, TextIO

from solartrack.solardata import SolarData

CLEAR_SCREEN = "\033[2J\033[1;1H"
QUIT_KEY = "q"
POLL_EVERY = 10

_QUIT_PROMPT = "Press 'q' and Enter to quit: "

KeySource = Callable[[], Optional[str]]


def render_frame(data: Sequence[SolarData], now: datetime) -> str:
    """Build the text of one screen for ``data`` at time ``now``."""
    lines = [
        "=== Solar Tracker Monitor ===",
        f"Time: {now.ctime()}",
        "Press 'q' to quit",
        "",
    ]
    if not data:
        lines.append("Waiting for data...")
    else:
        latest = data[-1]
        lines += [
            "Current Values:",
            f"  Horizontal Angle: {latest.horizontal_angle:.2f}°",
            f"  Vertical Angle: {latest.vertical_angle:.2f}°",
            f"  Temperature: {latest.temperature:.2f}°C",
            "",
        ]
    return "\n".join(lines) + "\n"


def _console_key() -> str | None:
    """Return a key waiting on the console, or None without blocking."""
    if os.name == "nt":
        import msvcrt

        if msvcrt.kbhit():
            return msvcrt.getwch().lower()
        return None

    import select

    try:
        ready, _, _ = select.select([sys.stdin], [], [], 0)
    except (OSError, ValueError):
        return None
    if not ready:
        return None
    char = sys.stdin.read(1)
    return char or None


class DataPlotter:
    """Redraws the console with the newest sample and watches for a quit key.

    ``key_source()`` returns a pending key or None; it is asked every tenth
    frame. ``clock()`` gives the time shown on each frame.
    """

    def __init__(
        self,
        out: TextIO | None = None,
        key_source: KeySource | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._out = out if out is not None else sys.stdout
        self._prompt = key_source is None and os.name != "nt"
        self._key_source = key_source if key_source is not None else _console_key
        self._clock = clock if clock is not None else datetime.now
        self.frame_count = 0
        self._quit = False

    def display_data(self, data: Sequence[SolarData]) -> None:
        """Clear the screen and draw one frame for ``data``."""
        self.frame_count += 1
        if self.frame_count % POLL_EVERY == 0:
            if self._prompt:
                self._out.write(_QUIT_PROMPT)
                self._out.flush()
            if self._key_source() == QUIT_KEY:
                self._quit = True
        self._out.write(CLEAR_SCREEN + render_frame(data, self._clock()))
        self._out.flush()

    def should_quit(self) -> bool:
        return self._quit