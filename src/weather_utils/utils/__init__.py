"""Utility helpers."""

from weather_utils.utils.constants import UNIT_EQUALITY_EPSILON
from weather_utils.utils.exceptions import ConfigurationError, WeatherUtilsError
from weather_utils.utils.logging import configure_logging

__all__ = [
    "ConfigurationError",
    "UNIT_EQUALITY_EPSILON",
    "WeatherUtilsError",
    "configure_logging",
]
