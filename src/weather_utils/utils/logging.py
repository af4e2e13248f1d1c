"""Logging helpers for library users and examples."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LIBRARY_LOGGER_NAME = "weather_utils"


def configure_logging(level: int = logging.INFO, library_level: int | None = None) -> None:
    """Configure a minimal logging setup for examples and scripts.

    Args:
        level: Root logger level passed to ``logging.basicConfig``.
        library_level: Optional level for the ``weather_utils`` logger, e.g.
            ``logging.DEBUG`` to report math backend selection.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    if library_level is not None:
        logging.getLogger(LIBRARY_LOGGER_NAME).setLevel(library_level)
