"""Tests for logging helpers."""

from __future__ import annotations

import logging
import unittest

from weather_utils.config import build_math_config
from weather_utils.utils.logging import configure_logging


class LoggingUtilsTests(unittest.TestCase):
    """Coverage tests for logging configuration and library log records."""

    def test_logging_helper_runs(self) -> None:
        """Smoke-test logging helper configuration."""
        configure_logging(logging.INFO)
        logger = logging.getLogger("weather_utils_test")
        logger.info("smoke")

    def test_library_level_is_applied(self) -> None:
        """Set the package logger level when requested."""
        library_logger = logging.getLogger("weather_utils")
        previous = library_logger.level
        try:
            configure_logging(logging.INFO, library_level=logging.DEBUG)
            self.assertEqual(library_logger.level, logging.DEBUG)
        finally:
            library_logger.setLevel(previous)

    def test_backend_selection_is_logged_at_debug(self) -> None:
        """Emit a debug record naming the selected math backend."""
        with self.assertLogs("weather_utils.config", level=logging.DEBUG) as captured:
            build_math_config()
        self.assertTrue(any("numpy" in line for line in captured.output))


if __name__ == "__main__":
    unittest.main()
