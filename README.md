# solartrack

Tools for a two-axis solar tracker. Four light-dependent resistors steer the tracker
toward the brightest direction. It reports its servo angles and temperature over a
serial line.

## Installation

```
pip install .
```

The only runtime dependency is `pyserial`.

## Console monitor

```
solartrack-monitor [PORT] [--baud RATE]
```

If you leave out `PORT`, the monitor prompts for one, for example `COM3` or
`/dev/ttyACM0`. The default baud rate is 9600, with 8 data bits, no parity and one stop bit.

The tracker must send lines of the form `horizontal,vertical,temperature`, such as
`90,45,23.5`. The monitor reads these lines in a background thread and keeps the last 100
samples. About ten times a second it clears the console and shows the newest horizontal
angle, vertical angle and temperature. It reports lines it cannot parse on standard error
and skips them.

To quit, press `q`. On POSIX systems, type `q` and press Enter. The monitor checks for the
key every tenth frame. Ctrl+C also stops it.

If the port cannot be opened, the monitor exits with status 1.

## Telemetry panel

```
solartrack-panel [PORT] [--baud RATE]
```

The default port is `COM5` and the default baud rate is 9600. The panel reads lines of
the form `TEMP:<t>,HORI:<h>,VERT:<v>`. Each time a line parses, it prints a text panel to
the console with:

- the connection status, green when connected and red otherwise
- the temperature, to two decimals
- both servo angles

It ignores lines that do not parse. It exits with status 1 if the port cannot be opened or
a read error occurs, and with status 0 on Ctrl+C.

## Library

- `solartrack.solardata`
  - `SolarData`: a frozen sample with `horizontal_angle`, `vertical_angle`, `temperature`
    and `timestamp`.
  - `SolarHistory(maxlen=100)`: a thread-safe bounded store with `append`, `snapshot` and
    `len()`.
  - `parse_csv_line(line, timestamp=None)`: returns a `SolarData`. It returns `None` when
    the line has fewer than two commas. It raises `ValueError` when a field does not start
    with a number.
- `solartrack.serial_link`
  - `SerialLink(port_name, baud_rate=9600, port=None)`: a line-oriented serial
    connection. It offers `read_line`, `write_line`, `is_connected` and `close`, and works
    as a context manager.
  - `SerialPortError`: raised when the port cannot be opened, read or written.
- `solartrack.tracker`
  - `LDRTracker`: the light-seeking control loop. You supply hardware access as callables:
    `read_analog(pin)`, `write_servo(pin, angle)` and `sleep(seconds)`. `begin()` moves
    the servos to their start positions, 180° horizontal and 45° vertical. Each
    `update()` moves each servo one degree toward the brighter side when the difference
    exceeds `tolerance`, and keeps it within the limits you give.
  - `read_temperature()` and `adc_to_celsius()` convert raw readings with `value * 4.88 / 10`.
- `solartrack.plotter`
  - `render_frame(data, now)`: builds the text of one console frame.
  - `DataPlotter`: draws frames and watches for the quit key.
- `solartrack.monitor`
  - `Monitor(link, plotter, history=None)`: runs the collector thread and the display loop.
- `solartrack.telemetry`
  - `parse_telemetry(line)`: returns a `Telemetry`, or `None` when the line does not match.
  - `PanelState`: holds the panel's status and reading texts.

```python
from datetime import datetime
from solartrack.solardata import SolarHistory, parse_csv_line

history = SolarHistory(maxlen=100)
sample = parse_csv_line("90,45,23.5", datetime.now())
if sample is not None:
    history.append(sample)
latest = history.snapshot()[-1]
print(latest.horizontal_angle, latest.vertical_angle, latest.temperature)
```

## What it does not do

- The telemetry panel is plain console text. There is no graphical window.
- Neither command stores readings on disk. Only the in-memory history of the last 100
  samples is kept.
- `LDRTracker` does not drive pins or servos by itself. It works only through the
  callables you pass in.

## Running the tests

```
pip install .[test]
pytest
```