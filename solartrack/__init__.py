"""Serial monitoring, telemetry parsing and LDR control logic for a two-axis solar tracker."""

__version__ = "0.1.0"