"""Composite sensor readings and their derived quantities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from weather_utils.config import MathConfig
from weather_utils.formulas import compute_absolute_humidity, compute_altitude
from weather_utils.temperature import Temperature
from weather_utils.units import Celsius, Fahrenheit, TemperatureUnit, approx_equal, to_float32

U = TypeVar("U", bound=TemperatureUnit)
V = TypeVar("V", bound=TemperatureUnit)


@dataclass(frozen=True, eq=False)
class TemperatureAndRelativeHumidity(Generic[U]):
    """Combined temperature and relative humidity reading.

    Args:
        relative_humidity: Relative humidity [%], not range-checked.
        temperature: Air temperature in the reading's unit.
    """

    relative_humidity: float
    temperature: Temperature[U]

    def __post_init__(self) -> None:
        """Round the humidity to single precision."""
        object.__setattr__(self, "relative_humidity", to_float32(self.relative_humidity))

    @classmethod
    def from_celsius(
        cls,
        temperature: float,
        relative_humidity: float,
    ) -> TemperatureAndRelativeHumidity[Celsius]:
        """Build a reading from a Celsius temperature.

        Args:
            temperature: Air temperature [degC].
            relative_humidity: Relative humidity [%].

        Returns:
            Celsius-tagged reading.
        """
        return cls(
            relative_humidity=relative_humidity,
            temperature=Temperature.from_celsius(temperature),
        )

    @classmethod
    def from_fahrenheit(
        cls,
        temperature: float,
        relative_humidity: float,
    ) -> TemperatureAndRelativeHumidity[Fahrenheit]:
        """Build a reading from a Fahrenheit temperature.

        Args:
            temperature: Air temperature [degF].
            relative_humidity: Relative humidity [%].

        Returns:
            Fahrenheit-tagged reading.
        """
        return cls(
            relative_humidity=relative_humidity,
            temperature=Temperature.from_fahrenheit(temperature),
        )

    @classmethod
    def default(cls) -> TemperatureAndRelativeHumidity[Celsius]:
        """Return an all-zero reading in Celsius.

        Returns:
            ``0 %`` humidity at ``0.0 degC``.
        """
        return cls(
            relative_humidity=0.0,
            temperature=Temperature.default(),
        )

    def absolute_humidity(self, *, config: MathConfig | None = None) -> float:
        """Compute the absolute humidity of the reading.

        Args:
            config: Optional math backend selection.

        Returns:
            Absolute humidity [g/m^3].
        """
        return compute_absolute_humidity(
            self.temperature.celsius(),
            self.relative_humidity,
            config=config,
        )

    def convert(self, unit_type: type[V]) -> TemperatureAndRelativeHumidity[V]:
        """Re-express the reading in another temperature unit.

        Args:
            unit_type: Target unit class.

        Returns:
            Reading with converted temperature and unchanged humidity.
        """
        return TemperatureAndRelativeHumidity(
            relative_humidity=self.relative_humidity,
            temperature=self.temperature.convert(unit_type),
        )

    def to_celsius(self) -> TemperatureAndRelativeHumidity[Celsius]:
        """Re-express the reading in degrees Celsius.

        Returns:
            Celsius-tagged reading.
        """
        return self.convert(Celsius)

    def to_fahrenheit(self) -> TemperatureAndRelativeHumidity[Fahrenheit]:
        """Re-express the reading in degrees Fahrenheit.

        Returns:
            Fahrenheit-tagged reading.
        """
        return self.convert(Fahrenheit)

    def __eq__(self, other: object) -> bool:
        """Compare two readings of the same unit within tolerance.

        Args:
            other: Object to compare with.

        Returns:
            ``True`` if temperatures and humidities agree within tolerance.
        """
        if not isinstance(other, TemperatureAndRelativeHumidity):
            return NotImplemented
        return self.temperature == other.temperature and approx_equal(
            self.relative_humidity, other.relative_humidity
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, eq=False)
class TemperatureAndBarometricPressure(Generic[U]):
    """Combined temperature and barometric pressure reading.

    Args:
        barometric_pressure: Barometric pressure [hPa], not range-checked.
        temperature: Air temperature in the reading's unit.
    """

    barometric_pressure: float
    temperature: Temperature[U]

    def __post_init__(self) -> None:
        """Round the pressure to single precision."""
        object.__setattr__(self, "barometric_pressure", to_float32(self.barometric_pressure))

    @classmethod
    def from_celsius(
        cls,
        temperature: float,
        barometric_pressure: float,
    ) -> TemperatureAndBarometricPressure[Celsius]:
        """Build a reading from a Celsius temperature.

        Args:
            temperature: Air temperature [degC].
            barometric_pressure: Barometric pressure [hPa].

        Returns:
            Celsius-tagged reading.
        """
        return cls(
            barometric_pressure=barometric_pressure,
            temperature=Temperature.from_celsius(temperature),
        )

    @classmethod
    def from_fahrenheit(
        cls,
        temperature: float,
        barometric_pressure: float,
    ) -> TemperatureAndBarometricPressure[Fahrenheit]:
        """Build a reading from a Fahrenheit temperature.

        Args:
            temperature: Air temperature [degF].
            barometric_pressure: Barometric pressure [hPa].

        Returns:
            Fahrenheit-tagged reading.
        """
        return cls(
            barometric_pressure=barometric_pressure,
            temperature=Temperature.from_fahrenheit(temperature),
        )

    @classmethod
    def default(cls) -> TemperatureAndBarometricPressure[Celsius]:
        """Return an all-zero reading in Celsius.

        Returns:
            ``0 hPa`` pressure at ``0.0 degC``.
        """
        return cls(
            barometric_pressure=0.0,
            temperature=Temperature.default(),
        )

    def altitude(self, *, config: MathConfig | None = None) -> float:
        """Compute the altitude of the reading.

        Args:
            config: Optional math backend selection.

        Returns:
            Altitude [m].
        """
        return compute_altitude(
            self.temperature.celsius(),
            self.barometric_pressure,
            config=config,
        )

    def convert(self, unit_type: type[V]) -> TemperatureAndBarometricPressure[V]:
        """Re-express the reading in another temperature unit.

        Args:
            unit_type: Target unit class.

        Returns:
            Reading with converted temperature and unchanged pressure.
        """
        return TemperatureAndBarometricPressure(
            barometric_pressure=self.barometric_pressure,
            temperature=self.temperature.convert(unit_type),
        )

    def to_celsius(self) -> TemperatureAndBarometricPressure[Celsius]:
        """Re-express the reading in degrees Celsius.

        Returns:
            Celsius-tagged reading.
        """
        return self.convert(Celsius)

    def to_fahrenheit(self) -> TemperatureAndBarometricPressure[Fahrenheit]:
        """Re-express the reading in degrees Fahrenheit.

        Returns:
            Fahrenheit-tagged reading.
        """
        return self.convert(Fahrenheit)

    def __eq__(self, other: object) -> bool:
        """Compare two readings of the same unit within tolerance.

        Args:
            other: Object to compare with.

        Returns:
            ``True`` if temperatures and pressures agree within tolerance.
        """
        if not isinstance(other, TemperatureAndBarometricPressure):
            return NotImplemented
        return self.temperature == other.temperature and approx_equal(
            self.barometric_pressure, other.barometric_pressure
        )

    __hash__ = None  # type: ignore[assignment]


def compute_absolute_humidity_for(
    measurement: TemperatureAndRelativeHumidity[U],
    *,
    config: MathConfig | None = None,
) -> float:
    """Compute the absolute humidity of a reading in any unit.

    Args:
        measurement: Temperature and relative humidity reading.
        config: Optional math backend selection.

    Returns:
        Absolute humidity [g/m^3].
    """
    return measurement.absolute_humidity(config=config)


def compute_altitude_for(
    measurement: TemperatureAndBarometricPressure[U],
    *,
    config: MathConfig | None = None,
) -> float:
    """Compute the altitude of a reading in any unit.

    Args:
        measurement: Temperature and barometric pressure reading.
        config: Optional math backend selection.

    Returns:
        Altitude [m].
    """
    return measurement.altitude(config=config)
