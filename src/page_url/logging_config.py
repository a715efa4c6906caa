"""Logging configuration for the page-url CLI."""

import logging
import sys

PACKAGE_LOGGER = "page_url"


def setup_logging(level: str = "INFO", debug: bool = False) -> logging.Logger:
    """
    Send page-url log records to stderr.

    Only the ``page_url`` logger is configured; the root logger is left to
    the application embedding the library. stderr keeps stdout free for
    ``page-url parse --json``. Calling it again replaces the handler
    instead of stacking a second one.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        debug: Enable debug mode with logger names and line numbers

    Returns:
        The configured package logger
    """
    log_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)

    if debug:
        log_format = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
    else:
        log_format = "%(levelname)s: %(message)s"

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_format, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.set_name(PACKAGE_LOGGER)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if existing.get_name() == PACKAGE_LOGGER:
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    # Records are handled here; don't print them again through the root logger
    package_logger.propagate = False
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(name)
