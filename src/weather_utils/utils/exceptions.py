"""Custom exceptions for weather utilities."""


class WeatherUtilsError(Exception):
    """Base exception for weather utility errors."""


class ConfigurationError(WeatherUtilsError):
    """Raised when the math backend configuration is invalid."""
