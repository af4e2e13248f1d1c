"""Derive absolute humidity and altitude from a batch of weather-station readings."""

from __future__ import annotations

import argparse
import logging

import numpy as np

from weather_utils import (
    Temperature,
    TemperatureAndBarometricPressure,
    TemperatureAndRelativeHumidity,
    build_math_config,
    compute_absolute_humidity_array,
    compute_altitude_array,
)
from weather_utils.utils import configure_logging
from weather_utils.utils.exceptions import ConfigurationError

# (temperature [degF], relative humidity [%], pressure [hPa])
STATION_READINGS = (
    (70.12, 45.59, 991.32),
    (37.27, 34.71, 1013.25),
    (66.87, 62.40, 962.81),
    (107.70, 74.91, 1002.10),
)


def _parse_args() -> argparse.Namespace:
    """Parse command-line arguments for the sensor readings example.

    Returns:
        Parsed command-line namespace.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--backend",
        choices=("numpy", "torch"),
        default="numpy",
        help="Math backend evaluating exp/pow in single precision.",
    )
    return parser.parse_args()


def main() -> None:
    """Convert readings to Celsius and report derived quantities."""
    args = _parse_args()
    configure_logging(logging.INFO)
    logger = logging.getLogger("sensor_readings_example")

    try:
        config = build_math_config(backend=args.backend)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return

    for fahrenheit, relative_humidity, pressure in STATION_READINGS:
        humidity_reading = TemperatureAndRelativeHumidity.from_fahrenheit(
            fahrenheit, relative_humidity
        )
        pressure_reading = TemperatureAndBarometricPressure.from_fahrenheit(fahrenheit, pressure)
        logger.info(
            "%.2f degF (%.2f degC), %.2f %% RH, %.2f hPa -> %.2f g/m^3, %.2f m",
            fahrenheit,
            humidity_reading.to_celsius().temperature.celsius(),
            relative_humidity,
            pressure,
            humidity_reading.absolute_humidity(config=config),
            pressure_reading.altitude(config=config),
        )

    readings = np.asarray(STATION_READINGS, dtype=np.float32)
    celsius = np.asarray(
        [Temperature.from_fahrenheit(float(t)).celsius() for t in readings[:, 0]],
        dtype=np.float32,
    )
    humidity = compute_absolute_humidity_array(celsius, readings[:, 1], config=config)
    altitude = compute_altitude_array(celsius, readings[:, 2], config=config)
    logger.info("Mean absolute humidity: %.2f g/m^3", float(np.mean(humidity)))
    logger.info("Altitude spread: %.2f m", float(np.ptp(altitude)))


if __name__ == "__main__":
    main()
