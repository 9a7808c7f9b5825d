"""Light-seeking two-axis tracker driven by four light sensors."""

from __future__ import annotations

import time
from typing import Callable


def adc_to_celsius(value: int) -> float:
    """Convert a raw temperature-sensor reading to degrees Celsius."""
    return (value * 4.88) / 10


def _average(a: int, b: int) -> int:
    return int((a + b) / 2)


class LDRTracker:
    """Moves two servos towards the brightest light seen by four sensors.

    ``read_analog(pin)`` returns a raw reading and ``write_servo(pin, angle)``
    positions a servo. ``sleep`` takes seconds.
    """

    def __init__(
        self,
        read_analog: Callable[[int], int],
        write_servo: Callable[[int, int], None],
        h_pin: int,
        v_pin: int,
        ldr_tl: int,
        ldr_tr: int,
        ldr_bl: int,
        ldr_br: int,
        temp_sensor: int,
        h_low: int = 5,
        h_high: int = 175,
        v_low: int = 1,
        v_high: int = 100,
        tolerance: int = 90,
        delay_time: int = 10,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._read = read_analog
        self._write = write_servo
        self._sleep = sleep
        self.h_pin = h_pin
        self.v_pin = v_pin
        self.ldr_tl = ldr_tl
        self.ldr_tr = ldr_tr
        self.ldr_bl = ldr_bl
        self.ldr_br = ldr_br
        self.temp_sensor = temp_sensor
        self.h_low = h_low
        self.h_high = h_high
        self.v_low = v_low
        self.v_high = v_high
        self.tolerance = tolerance
        self.delay_time = delay_time
        self.servo_hori = 180
        self.servo_vert = 45
        self.last_temperature: float | None = None

    def begin(self) -> None:
        """Move both servos to their start positions and let them settle."""
        self._write(self.h_pin, self.servo_hori)
        self._write(self.v_pin, self.servo_vert)
        self._sleep(2.5)

    def update(self) -> None:
        """Read the sensors once and step each servo towards the light."""
        lt = self._read(self.ldr_tl)
        rt = self._read(self.ldr_tr)
        ld = self._read(self.ldr_bl)
        rd = self._read(self.ldr_br)

        top = _average(lt, rt)
        bottom = _average(ld, rd)
        left = _average(lt, ld)
        right = _average(rt, rd)

        self.last_temperature = adc_to_celsius(self._read(self.temp_sensor))

        if abs(top - bottom) > self.tolerance:
            if top > bottom:
                self.servo_vert = min(self.servo_vert + 1, self.v_high)
            else:
                self.servo_vert = max(self.servo_vert - 1, self.v_low)
            self._write(self.v_pin, self.servo_vert)

        if abs(left - right) > self.tolerance:
            if left > right:
                self.servo_hori = max(self.servo_hori - 1, self.h_low)
            else:
                self.servo_hori = min(self.servo_hori + 1, self.h_high)
            self._write(self.h_pin, self.servo_hori)

        self._sleep(self.delay_time / 1000)

    def read_temperature(self) -> float:
        """Read the temperature sensor now and return degrees Celsius."""
        return adc_to_celsius(self._read(self.temp_sensor))