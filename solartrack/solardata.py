"""Solar tracker samples, a bounded history of them, and the CSV line parser."""

from __future__ import annotations

import math
import re
import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime

_FLOAT_MAX = 3.4028234663852886e38

_LEADING_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class SolarData:
    """One reading from the tracker: servo angles and panel temperature."""

    horizontal_angle: float
    vertical_angle: float
    temperature: float
    timestamp: datetime = field(default_factory=datetime.now)


class SolarHistory:
    """A thread-safe store that keeps only the most recent samples."""

    def __init__(self, maxlen: int = 100) -> None:
        if maxlen < 1:
            raise ValueError("maxlen must be at least 1")
        self._samples: deque[SolarData] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    @property
    def maxlen(self) -> int:
        return self._samples.maxlen or 0

    def append(self, sample: SolarData) -> None:
        """Add a sample, dropping the oldest one once the store is full."""
        with self._lock:
            self._samples.append(sample)

    def snapshot(self) -> list[SolarData]:
        """Return a copy of the stored samples, oldest first."""
        with self._lock:
            return list(self._samples)

    def __len__(self) -> int:
        with self._lock:
            return len(self._samples)


def _leading_float(text: str) -> float:
    """Parse the number at the start of ``text``, ignoring what follows it."""
    match = _LEADING_FLOAT.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    token = match.group(1)
    value = float(token)
    if math.isfinite(value) and abs(value) > _FLOAT_MAX:
        raise ValueError(f"number out of range: {token!r}")
    return value


def parse_csv_line(line: str, timestamp: datetime | None = None) -> SolarData | None:
    """Parse ``horizontal,vertical,temperature`` into a sample.

    Returns None when the line has fewer than two commas. Raises ValueError
    when a field does not start with a number.
    """
    first = line.find(",")
    if first < 0:
        return None
    second = line.find(",", first + 1)
    if second < 0:
        return None
    horizontal = _leading_float(line[:first])
    vertical = _leading_float(line[first + 1 : second])
    temperature = _leading_float(line[second + 1 :])
    return SolarData(
        horizontal_angle=horizontal,
        vertical_angle=vertical,
        temperature=temperature,
        timestamp=timestamp if timestamp is not None else datetime.now(),
    )