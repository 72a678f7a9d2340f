"""Logging setup for the API process."""

import logging

from user_directory.config import LOG_FORMAT, LOG_LEVEL

_configured = False


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure the root logger once per process.

    Args:
        level: Log level name, e.g. "INFO" or "DEBUG".
    """
    global _configured
    if _configured:
        return

    logging.basicConfig(level=level, format=LOG_FORMAT)
    _configured = True
