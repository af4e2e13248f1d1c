"""Shared test helpers."""

from __future__ import annotations

import importlib.util

TORCH_AVAILABLE = importlib.util.find_spec("torch") is not None

# Tolerance used by every known-value check [same unit as the compared value].
KNOWN_VALUE_TOLERANCE = 0.01

# (temperature, unit, relative humidity [%], absolute humidity [g/m^3])
ABSOLUTE_HUMIDITY_CASES = (
    (21.18, "celsius", 45.59, 8.43),
    (70.12, "fahrenheit", 45.59, 8.43),
    (2.93, "celsius", 34.71, 2.06),
    (107.7, "fahrenheit", 74.91, 42.49),
)

# (temperature [degC], pressure [hPa], altitude [m])
ALTITUDE_CASES = (
    (20.55, 991.32, 188.46),
    (17.93, 1013.25, 0.0),
    (37.5, 1013.25, 0.0),
    (19.37, 962.81, 439.25),
)

# (temperature [degC], temperature [degF])
CELSIUS_FAHRENHEIT_PAIRS = (
    (0.0, 32.0),
    (15.73, 60.31),
    (-7.49, 18.52),
    (37.5, 99.5),
)
