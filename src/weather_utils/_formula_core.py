"""Backend-specific formula kernels evaluated in single precision.

Each formula exists once per backend and accepts scalars or arrays. Inputs are
never validated: division by zero and ``pow`` of non-positive bases yield
IEEE infinities and NaNs that propagate silently to the caller.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from weather_utils.utils.constants import (
    BAROMETRIC_EXPONENT_DENOMINATOR,
    MAGNUS_COEFFICIENT,
    MAGNUS_SATURATION_PRESSURE_HPA,
    MAGNUS_TEMPERATURE_OFFSET_C,
    SEA_LEVEL_PRESSURE_HPA,
    TEMPERATURE_LAPSE_RATE_KPM,
    WATER_VAPOR_DENSITY_FACTOR,
    ZERO_CELSIUS_K,
)

ALTITUDE_EXPONENT = float(np.float32(1.0) / np.float32(BAROMETRIC_EXPONENT_DENOMINATOR))


def absolute_humidity_numpy(
    *,
    temperature: np.ndarray | float,
    relative_humidity: np.ndarray | float,
) -> np.ndarray:
    """Return absolute humidity for scalar/vector input.

    Args:
        temperature: Air temperature [degC].
        relative_humidity: Relative humidity [%].

    Returns:
        Absolute humidity [g/m^3] as ``float32``.
    """
    with np.errstate(all="ignore"):
        t = np.asarray(temperature, dtype=np.float32)
        rh = np.asarray(relative_humidity, dtype=np.float32)
        exponent = (np.float32(MAGNUS_COEFFICIENT) * t) / (
            t + np.float32(MAGNUS_TEMPERATURE_OFFSET_C)
        )
        vapor = (
            np.float32(MAGNUS_SATURATION_PRESSURE_HPA)
            * np.exp(exponent)
            * rh
            * np.float32(WATER_VAPOR_DENSITY_FACTOR)
        )
        humidity = vapor / (np.float32(ZERO_CELSIUS_K) + t)
    return np.asarray(humidity, dtype=np.float32)


def absolute_humidity_torch(
    *,
    torch: Any,
    temperature: Any,
    relative_humidity: Any,
    device: str = "cpu",
) -> Any:
    """Return absolute humidity for torch tensor input.

    Args:
        torch: Imported torch module.
        temperature: Air temperature tensor [degC].
        relative_humidity: Relative humidity tensor [%].
        device: Torch device the computation runs on.

    Returns:
        Absolute humidity tensor [g/m^3] as ``float32``.
    """
    t = torch.as_tensor(temperature, dtype=torch.float32, device=device)
    rh = torch.as_tensor(relative_humidity, dtype=torch.float32, device=device)
    exponent = (MAGNUS_COEFFICIENT * t) / (t + MAGNUS_TEMPERATURE_OFFSET_C)
    vapor = MAGNUS_SATURATION_PRESSURE_HPA * torch.exp(exponent) * rh * WATER_VAPOR_DENSITY_FACTOR
    return vapor / (ZERO_CELSIUS_K + t)


def altitude_numpy(
    *,
    temperature: np.ndarray | float,
    pressure: np.ndarray | float,
) -> np.ndarray:
    """Return barometric altitude for scalar/vector input.

    Args:
        temperature: Air temperature [degC].
        pressure: Barometric pressure [hPa].

    Returns:
        Altitude above the sea-level reference [m] as ``float32``.
    """
    with np.errstate(all="ignore"):
        t = np.asarray(temperature, dtype=np.float32)
        p = np.asarray(pressure, dtype=np.float32)
        ratio = np.float32(SEA_LEVEL_PRESSURE_HPA) / p
        # Exactly zero at the reference pressure for any finite temperature.
        pressure_term = np.power(ratio, np.float32(ALTITUDE_EXPONENT)) - np.float32(1.0)
        altitude = (
            pressure_term
            * (t + np.float32(ZERO_CELSIUS_K))
            / np.float32(TEMPERATURE_LAPSE_RATE_KPM)
        )
    return np.asarray(altitude, dtype=np.float32)


def altitude_torch(
    *,
    torch: Any,
    temperature: Any,
    pressure: Any,
    device: str = "cpu",
) -> Any:
    """Return barometric altitude for torch tensor input.

    Args:
        torch: Imported torch module.
        temperature: Air temperature tensor [degC].
        pressure: Barometric pressure tensor [hPa].
        device: Torch device the computation runs on.

    Returns:
        Altitude tensor [m] as ``float32``.
    """
    t = torch.as_tensor(temperature, dtype=torch.float32, device=device)
    p = torch.as_tensor(pressure, dtype=torch.float32, device=device)
    pressure_term = torch.pow(SEA_LEVEL_PRESSURE_HPA / p, ALTITUDE_EXPONENT) - 1.0
    return pressure_term * (t + ZERO_CELSIUS_K) / TEMPERATURE_LAPSE_RATE_KPM
