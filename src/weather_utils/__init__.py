"""Closed-form meteorological conversions with unit-tagged temperatures."""

from weather_utils.config import MathConfig, build_math_config
from weather_utils.formulas import (
    compute_absolute_humidity,
    compute_absolute_humidity_array,
    compute_altitude,
    compute_altitude_array,
)
from weather_utils.measurements import (
    TemperatureAndBarometricPressure,
    TemperatureAndRelativeHumidity,
    compute_absolute_humidity_for,
    compute_altitude_for,
)
from weather_utils.temperature import Temperature
from weather_utils.units import (
    Celsius,
    Fahrenheit,
    TemperatureUnit,
    approx_equal,
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
)

__all__ = [
    "Celsius",
    "Fahrenheit",
    "MathConfig",
    "Temperature",
    "TemperatureAndBarometricPressure",
    "TemperatureAndRelativeHumidity",
    "TemperatureUnit",
    "approx_equal",
    "build_math_config",
    "celsius_to_fahrenheit",
    "compute_absolute_humidity",
    "compute_absolute_humidity_array",
    "compute_absolute_humidity_for",
    "compute_altitude",
    "compute_altitude_array",
    "compute_altitude_for",
    "fahrenheit_to_celsius",
]
