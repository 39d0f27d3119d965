"""
Logging utilities for the recipe measurement app.

Provides the package logger setup and per-module logger lookup.
"""

import logging
import sys

ROOT_LOGGER_NAME = 'cooks_friend'


def setup_logging(log_level='INFO'):
    """
    Set up console logging for the app.

    Args:
        log_level: Log level name (DEBUG, INFO, WARNING, ERROR)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Clear any existing handlers so repeated setup does not duplicate output
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(handler)

    logger.debug(f"Logging initialized - Level: {log_level}")
    return logger


def get_logger(name):
    """
    Get a logger instance for a specific module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance under the package logger
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
