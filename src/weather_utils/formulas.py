"""Absolute humidity and barometric altitude formulas.

The formulas are unit-unaware and always take temperatures in degrees
Celsius. Unit normalization happens in :mod:`weather_utils.measurements`.
"""

from __future__ import annotations

import numpy as np

from weather_utils._formula_core import (
    absolute_humidity_numpy,
    absolute_humidity_torch,
    altitude_numpy,
    altitude_torch,
)
from weather_utils.config import MathConfig, require_torch, resolve_math_config


def compute_absolute_humidity_array(
    temperature_celsius: np.ndarray | float,
    relative_humidity: np.ndarray | float,
    *,
    config: MathConfig | None = None,
) -> np.ndarray:
    """Compute absolute humidity for a series of readings.

    Args:
        temperature_celsius: Air temperatures [degC].
        relative_humidity: Relative humidities [%], broadcast against
            ``temperature_celsius``.
        config: Optional math backend selection. Defaults to NumPy.

    Returns:
        Absolute humidity [g/m^3] as a ``float32`` array.

    Raises:
        weather_utils.utils.exceptions.ConfigurationError: If ``config`` is
            invalid.
    """
    resolved = resolve_math_config(config)
    if resolved.backend == "torch":
        torch = require_torch()
        humidity = absolute_humidity_torch(
            torch=torch,
            temperature=temperature_celsius,
            relative_humidity=relative_humidity,
            device=resolved.torch_device,
        )
        return np.asarray(humidity.detach().cpu().numpy(), dtype=np.float32)
    return absolute_humidity_numpy(
        temperature=temperature_celsius,
        relative_humidity=relative_humidity,
    )


def compute_altitude_array(
    temperature_celsius: np.ndarray | float,
    pressure_hpa: np.ndarray | float,
    *,
    config: MathConfig | None = None,
) -> np.ndarray:
    """Compute barometric altitude for a series of readings.

    Args:
        temperature_celsius: Air temperatures [degC].
        pressure_hpa: Barometric pressures [hPa], broadcast against
            ``temperature_celsius``.
        config: Optional math backend selection. Defaults to NumPy.

    Returns:
        Altitude [m] as a ``float32`` array.

    Raises:
        weather_utils.utils.exceptions.ConfigurationError: If ``config`` is
            invalid.
    """
    resolved = resolve_math_config(config)
    if resolved.backend == "torch":
        torch = require_torch()
        altitude = altitude_torch(
            torch=torch,
            temperature=temperature_celsius,
            pressure=pressure_hpa,
            device=resolved.torch_device,
        )
        return np.asarray(altitude.detach().cpu().numpy(), dtype=np.float32)
    return altitude_numpy(temperature=temperature_celsius, pressure=pressure_hpa)


def compute_absolute_humidity(
    temperature_celsius: float,
    relative_humidity: float,
    *,
    config: MathConfig | None = None,
) -> float:
    """Compute the absolute humidity of air.

    ``6.112 * exp(17.67 * T / (T + 243.5)) * RH * 2.1674 / (273.15 + T)``

    Args:
        temperature_celsius: Air temperature [degC].
        relative_humidity: Relative humidity [%].
        config: Optional math backend selection. Defaults to NumPy.

    Returns:
        Absolute humidity [g/m^3]. ``T = -273.15`` yields an infinity.
    """
    return float(
        compute_absolute_humidity_array(temperature_celsius, relative_humidity, config=config)
    )


def compute_altitude(
    temperature_celsius: float,
    pressure_hpa: float,
    *,
    config: MathConfig | None = None,
) -> float:
    """Compute the altitude from barometric pressure and temperature.

    ``((1013.25 / P) ** (1 / 5.257) - 1) * (T + 273.15) / 0.0065``

    Args:
        temperature_celsius: Air temperature [degC].
        pressure_hpa: Barometric pressure [hPa].
        config: Optional math backend selection. Defaults to NumPy.

    Returns:
        Altitude [m]; ``0.0`` at ``P = 1013.25`` and NaN for negative pressure.
    """
    return float(compute_altitude_array(temperature_celsius, pressure_hpa, config=config))
