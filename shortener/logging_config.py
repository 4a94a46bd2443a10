"""
Application logging configuration.

This module provides unified logging configuration for the short link service.
Every module that logs goes through setup_logging() so that the handler and
format are configured exactly once, whichever module is imported first.
"""
import logging
import sys

from shortener.config import settings


def setup_logging() -> logging.Logger:
    """
    Configure and return the application logger.

    The logger outputs to stdout with a structured format including:
    - Timestamp
    - Logger name
    - Log level
    - Message

    The level comes from the LOG_LEVEL setting, case-insensitive.

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger("shortener")
    level = settings.LOG_LEVEL.upper()
    logger.setLevel(level)

    # Prevent duplicate handlers if called multiple times
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
