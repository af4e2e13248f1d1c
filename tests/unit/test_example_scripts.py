"""Unit tests for the runnable example scripts."""

from __future__ import annotations

import importlib.util
import sys
import unittest
from pathlib import Path
from types import ModuleType
from unittest.mock import patch

from weather_utils.utils.exceptions import ConfigurationError


def _load_example_module(script_name: str) -> ModuleType:
    """Load one script module from ``examples/`` for unit testing.

    Args:
        script_name: Script filename under ``examples/``.

    Returns:
        Imported module object for the requested script.
    """
    root = Path(__file__).resolve().parents[2]
    script_path = root / "examples" / script_name
    spec = importlib.util.spec_from_file_location(script_name.replace(".py", ""), script_path)
    if spec is None or spec.loader is None:
        raise AssertionError(f"Could not load example module: {script_path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


class SensorReadingsExampleTests(unittest.TestCase):
    """Run the station readings example end to end."""

    @classmethod
    def setUpClass(cls) -> None:
        """Load the example script once for all tests."""
        cls.example = _load_example_module("sensor_readings.py")

    def test_numpy_backend_reports_every_reading(self) -> None:
        """Log one line per station reading plus the batch summary."""
        argv = ["sensor_readings.py", "--backend", "numpy"]
        with patch.object(sys, "argv", argv), self.assertLogs(
            "sensor_readings_example", level="INFO"
        ) as captured:
            self.example.main()

        messages = [record.getMessage() for record in captured.records]
        self.assertEqual(len(messages), len(self.example.STATION_READINGS) + 2)
        self.assertTrue(messages[0].startswith("70.12 degF (21.18 degC)"))
        self.assertTrue(any(m.startswith("Mean absolute humidity:") for m in messages))
        self.assertTrue(any(m.startswith("Altitude spread:") for m in messages))
        self.assertFalse(any("nan" in m or "inf" in m for m in messages))

    def test_configuration_error_is_logged(self) -> None:
        """Log backend configuration failures instead of raising."""
        argv = ["sensor_readings.py", "--backend", "torch"]
        failure = ConfigurationError("PyTorch backend requested but torch is not installed.")
        with patch.object(sys, "argv", argv), patch.object(
            self.example, "build_math_config", side_effect=failure
        ), self.assertLogs("sensor_readings_example", level="ERROR") as captured:
            self.example.main()

        self.assertEqual(len(captured.records), 1)
        self.assertIn("torch is not installed", captured.records[0].getMessage())


if __name__ == "__main__":
    unittest.main()
