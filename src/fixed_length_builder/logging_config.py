"""
Logging for the fixed-length file builder.

Modules log through get_logger(); the CLI calls setup_logging() once.
Library users who never call it get no output from the package beyond
what their own logging configuration allows.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

LOGGER_NAME = "fixed_length_builder"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SHORT_FORMAT = "%(levelname)s: %(message)s"


def _handler(handler: logging.Handler, level: int, log_format: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format))
    return handler


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[Path] = None,
    verbose: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the package logger, replacing any earlier setup.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file that receives detailed records
        verbose: Detailed console format instead of "LEVEL: message"
        stream: Console stream, stderr by default so stdout can carry
            the built file

    Returns:
        The package logger
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.setLevel(log_level)
    logger.propagate = False

    console_format = DETAILED_FORMAT if verbose else SHORT_FORMAT
    logger.addHandler(
        _handler(logging.StreamHandler(stream or sys.stderr), log_level, console_format)
    )
    if log_file:
        logger.addHandler(
            _handler(logging.FileHandler(log_file, encoding="utf-8"), log_level, DETAILED_FORMAT)
        )

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or its child `name`."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)
