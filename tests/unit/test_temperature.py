"""Unit tests for the unit-tagged temperature wrapper."""

from __future__ import annotations

import unittest

from tests.helpers import KNOWN_VALUE_TOLERANCE
from weather_utils.temperature import Temperature
from weather_utils.units import Celsius, Fahrenheit


class _SensorTemperature(Temperature[Celsius]):
    """Temperature subtype used to check alternate constructors."""


class TemperatureTests(unittest.TestCase):
    """Validate construction, accessors and conversion of temperatures."""

    def test_constructors_wrap_expected_unit(self) -> None:
        """Build Celsius- and Fahrenheit-tagged temperatures."""
        self.assertIsInstance(Temperature.from_celsius(21.18).unit, Celsius)
        self.assertIsInstance(Temperature.from_fahrenheit(70.12).unit, Fahrenheit)
        self.assertEqual(Temperature(Celsius(21.18)), Temperature.from_celsius(21.18))

    def test_default_is_zero_celsius(self) -> None:
        """Default to a zero reading in Celsius."""
        default = Temperature.default()
        self.assertIsInstance(default.unit, Celsius)
        self.assertEqual(default.celsius(), 0.0)

    def test_constructors_build_subclass_instances(self) -> None:
        """Return the calling subclass from alternate constructors."""
        self.assertIsInstance(_SensorTemperature.from_celsius(21.18), _SensorTemperature)
        self.assertIsInstance(_SensorTemperature.from_fahrenheit(70.12), _SensorTemperature)
        self.assertIsInstance(_SensorTemperature.default(), _SensorTemperature)

    def test_accessors_report_both_scales(self) -> None:
        """Report Celsius and Fahrenheit regardless of stored unit."""
        celsius = Temperature.from_celsius(37.5)
        fahrenheit = Temperature.from_fahrenheit(99.5)
        self.assertAlmostEqual(celsius.fahrenheit(), 99.5, delta=KNOWN_VALUE_TOLERANCE)
        self.assertAlmostEqual(fahrenheit.celsius(), 37.5, delta=KNOWN_VALUE_TOLERANCE)
        self.assertEqual(celsius.celsius(), 37.5)
        self.assertEqual(fahrenheit.fahrenheit(), 99.5)

    def test_conversion_changes_unit_tag(self) -> None:
        """Convert between Celsius and Fahrenheit tags."""
        converted = Temperature.from_celsius(21.18).to_fahrenheit()
        self.assertIsInstance(converted.unit, Fahrenheit)
        self.assertEqual(converted, Temperature.from_fahrenheit(70.12))

        back = converted.to_celsius()
        self.assertIsInstance(back.unit, Celsius)
        self.assertEqual(back, Temperature.from_celsius(21.18))

    def test_convert_to_current_unit_is_noop(self) -> None:
        """Return an equal value when converting to the stored unit."""
        temperature = Temperature.from_fahrenheit(70.12)
        same = temperature.convert(Fahrenheit)
        self.assertEqual(same, temperature)
        self.assertEqual(same.fahrenheit(), temperature.fahrenheit())

    def test_round_trip_preserves_value(self) -> None:
        """Preserve value across Celsius -> Fahrenheit -> Celsius."""
        for value in (-50.0, -7.49, 0.0, 15.73, 42.0, 150.0):
            with self.subTest(value=value):
                original = Temperature.from_celsius(value)
                self.assertEqual(original.to_fahrenheit().to_celsius(), original)

    def test_temperatures_of_different_units_are_not_equal(self) -> None:
        """Require explicit conversion before comparing across units."""
        self.assertNotEqual(Temperature.from_celsius(0.0), Temperature.from_fahrenheit(32.0))
        self.assertNotEqual(Temperature.from_celsius(0.0), Celsius(0.0))

    def test_temperature_is_immutable(self) -> None:
        """Reject in-place mutation of the wrapped unit."""
        temperature = Temperature.from_celsius(1.0)
        with self.assertRaises(AttributeError):
            temperature.unit = Celsius(2.0)  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
