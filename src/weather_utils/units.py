"""Temperature unit representations and scalar unit conversions.

Magnitudes are stored and converted in single precision. Every conversion
rounds its inputs to ``float32``, evaluates in ``float32`` and hands the result
back as a Python ``float`` holding that ``float32`` value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TypeVar

import numpy as np

from weather_utils.utils.constants import (
    CELSIUS_TO_FAHRENHEIT_FACTOR,
    FAHRENHEIT_OFFSET,
    FAHRENHEIT_TO_CELSIUS_FACTOR,
    UNIT_EQUALITY_EPSILON,
)

RELATIVE_EQUALITY_TOLERANCE = float(np.finfo(np.float32).eps)

_UnitT = TypeVar("_UnitT", bound="TemperatureUnit")


def to_float32(value: float) -> float:
    """Round a scalar to the nearest single-precision value.

    Args:
        value: Scalar magnitude.

    Returns:
        ``value`` rounded to ``float32`` and returned as a Python float.
    """
    with np.errstate(all="ignore"):
        return float(np.float32(value))


def celsius_to_fahrenheit(temperature: float) -> float:
    """Convert a temperature in degrees Celsius to degrees Fahrenheit.

    Args:
        temperature: Temperature [degC].

    Returns:
        Temperature [degF].
    """
    with np.errstate(all="ignore"):
        scaled = np.float32(temperature) * np.float32(CELSIUS_TO_FAHRENHEIT_FACTOR)
        converted = scaled + np.float32(FAHRENHEIT_OFFSET)
    return float(converted)


def fahrenheit_to_celsius(temperature: float) -> float:
    """Convert a temperature in degrees Fahrenheit to degrees Celsius.

    Uses the truncated factor ``0.55555`` rather than the exact ``5/9``, so a
    Celsius -> Fahrenheit -> Celsius round trip is only approximately the
    identity (well inside ``UNIT_EQUALITY_EPSILON`` for ambient readings).

    Args:
        temperature: Temperature [degF].

    Returns:
        Temperature [degC].
    """
    with np.errstate(all="ignore"):
        offset = np.float32(temperature) - np.float32(FAHRENHEIT_OFFSET)
        converted = offset * np.float32(FAHRENHEIT_TO_CELSIUS_FACTOR)
    return float(converted)


def approx_equal(
    left: float,
    right: float,
    epsilon: float = UNIT_EQUALITY_EPSILON,
    max_relative: float = RELATIVE_EQUALITY_TOLERANCE,
) -> bool:
    """Compare two single-precision magnitudes with an absolute tolerance.

    Values are equal when identical (which covers matching infinities), when
    ``|left - right| <= epsilon``, or when the difference is within
    ``max_relative`` of the larger magnitude. NaN never compares equal.

    Args:
        left: First magnitude.
        right: Second magnitude.
        epsilon: Absolute tolerance.
        max_relative: Relative tolerance applied to the larger magnitude.

    Returns:
        ``True`` if both magnitudes are equal within tolerance.
    """
    with np.errstate(all="ignore"):
        a = np.float32(left)
        b = np.float32(right)
    if a == b:
        return True
    if np.isinf(a) or np.isinf(b):
        return False
    with np.errstate(all="ignore"):
        difference = abs(a - b)
    if difference <= np.float32(epsilon):
        return True
    largest = max(abs(a), abs(b))
    return bool(difference <= largest * np.float32(max_relative))


class TemperatureUnit(ABC):
    """Capability shared by temperature representations.

    A unit value stores one magnitude in its native scale and reports it in
    both Celsius and Fahrenheit. Two values compare equal only when they are of
    the same unit type and their magnitudes agree within
    ``UNIT_EQUALITY_EPSILON``. Values are unhashable because tolerance-based
    equality is not transitive.
    """

    value: float

    @abstractmethod
    def celsius(self) -> float:
        """Return the temperature in degrees Celsius.

        Returns:
            Temperature [degC].
        """

    @abstractmethod
    def fahrenheit(self) -> float:
        """Return the temperature in degrees Fahrenheit.

        Returns:
            Temperature [degF].
        """

    @classmethod
    @abstractmethod
    def from_unit(cls: type[_UnitT], unit: TemperatureUnit) -> _UnitT:
        """Express another unit value in this unit.

        Args:
            unit: Temperature in any unit.

        Returns:
            Equivalent temperature in this unit.
        """

    def __eq__(self, other: object) -> bool:
        """Compare two values of the same unit within tolerance.

        Args:
            other: Object to compare with.

        Returns:
            ``True`` if ``other`` has the same unit type and an equal
            magnitude within tolerance, ``NotImplemented`` for other types.
        """
        if not isinstance(other, TemperatureUnit) or type(other) is not type(self):
            return NotImplemented
        return approx_equal(self.value, other.value)

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, eq=False)
class Celsius(TemperatureUnit):
    """Temperature expressed in degrees Celsius.

    Args:
        value: Temperature magnitude [degC], rounded to ``float32``.
    """

    value: float

    def __post_init__(self) -> None:
        """Round the stored magnitude to single precision."""
        object.__setattr__(self, "value", to_float32(self.value))

    def celsius(self) -> float:
        """Return the stored magnitude.

        Returns:
            Temperature [degC].
        """
        return self.value

    def fahrenheit(self) -> float:
        """Return the magnitude converted to Fahrenheit.

        Returns:
            Temperature [degF].
        """
        return celsius_to_fahrenheit(self.value)

    @classmethod
    def from_unit(cls, unit: TemperatureUnit) -> Celsius:
        """Express a unit value in degrees Celsius.

        Args:
            unit: Temperature in any unit.

        Returns:
            Equivalent Celsius value.
        """
        return cls(unit.celsius())


@dataclass(frozen=True, eq=False)
class Fahrenheit(TemperatureUnit):
    """Temperature expressed in degrees Fahrenheit.

    Args:
        value: Temperature magnitude [degF], rounded to ``float32``.
    """

    value: float

    def __post_init__(self) -> None:
        """Round the stored magnitude to single precision."""
        object.__setattr__(self, "value", to_float32(self.value))

    def celsius(self) -> float:
        """Return the magnitude converted to Celsius.

        Returns:
            Temperature [degC].
        """
        return fahrenheit_to_celsius(self.value)

    def fahrenheit(self) -> float:
        """Return the stored magnitude.

        Returns:
            Temperature [degF].
        """
        return self.value

    @classmethod
    def from_unit(cls, unit: TemperatureUnit) -> Fahrenheit:
        """Express a unit value in degrees Fahrenheit.

        Args:
            unit: Temperature in any unit.

        Returns:
            Equivalent Fahrenheit value.
        """
        return cls(unit.fahrenheit())
