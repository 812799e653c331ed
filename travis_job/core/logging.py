"""
Centralized logging configuration.
"""

import logging
import sys

APP_LOGGER = "travis_job"


def setup_logging() -> logging.Logger:
    """
    Configure process-wide logging and return the application logger.

    The level is applied to the returned logger once settings are loaded.
    """
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
        stream=sys.stdout,
    )
    return logging.getLogger(APP_LOGGER)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)
