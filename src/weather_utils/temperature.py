"""Unit-tagged temperature wrapper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from weather_utils.units import Celsius, Fahrenheit, TemperatureUnit

U = TypeVar("U", bound=TemperatureUnit)
V = TypeVar("V", bound=TemperatureUnit)


@dataclass(frozen=True, eq=False)
class Temperature(Generic[U]):
    """Temperature tagged with the unit it was measured in.

    The wrapper reports the value in both scales; the non-native one is
    derived on every access. ``Temperature[Celsius]`` and
    ``Temperature[Fahrenheit]`` never compare equal, convert explicitly first.

    Args:
        unit: Unit value holding the magnitude.
    """

    unit: U

    @classmethod
    def from_celsius(cls, value: float) -> Temperature[Celsius]:
        """Build a temperature from a Celsius magnitude.

        Args:
            value: Temperature [degC].

        Returns:
            Celsius-tagged temperature.
        """
        return cls(Celsius(value))

    @classmethod
    def from_fahrenheit(cls, value: float) -> Temperature[Fahrenheit]:
        """Build a temperature from a Fahrenheit magnitude.

        Args:
            value: Temperature [degF].

        Returns:
            Fahrenheit-tagged temperature.
        """
        return cls(Fahrenheit(value))

    @classmethod
    def default(cls) -> Temperature[Celsius]:
        """Return the zero reading in the default unit (Celsius).

        Returns:
            ``0.0 degC`` temperature.
        """
        return cls(Celsius(0.0))

    def celsius(self) -> float:
        """Return the temperature in degrees Celsius.

        Returns:
            Temperature [degC].
        """
        return self.unit.celsius()

    def fahrenheit(self) -> float:
        """Return the temperature in degrees Fahrenheit.

        Returns:
            Temperature [degF].
        """
        return self.unit.fahrenheit()

    def convert(self, unit_type: type[V]) -> Temperature[V]:
        """Re-express the temperature in another unit.

        Args:
            unit_type: Target unit class, e.g. :class:`Celsius`.

        Returns:
            Temperature tagged with ``unit_type``. Converting to the current
            unit returns an equal value.
        """
        return Temperature(unit_type.from_unit(self.unit))

    def to_celsius(self) -> Temperature[Celsius]:
        """Re-express the temperature in degrees Celsius.

        Returns:
            Celsius-tagged temperature.
        """
        return self.convert(Celsius)

    def to_fahrenheit(self) -> Temperature[Fahrenheit]:
        """Re-express the temperature in degrees Fahrenheit.

        Returns:
            Fahrenheit-tagged temperature.
        """
        return self.convert(Fahrenheit)

    def __eq__(self, other: object) -> bool:
        """Compare two temperatures of the same unit within tolerance.

        Args:
            other: Object to compare with.

        Returns:
            ``True`` if both wrap equal values of the same unit.
        """
        if not isinstance(other, Temperature):
            return NotImplemented
        return self.unit == other.unit

    __hash__ = None  # type: ignore[assignment]
