"""Tests for logging configuration."""

import logging

from page_url.logging_config import PACKAGE_LOGGER, setup_logging


def test_setup_logging_configures_package_logger_only():
    """The root logger is left alone."""
    root_handlers = list(logging.getLogger().handlers)
    package_logger = setup_logging(level="warning")
    assert package_logger.name == PACKAGE_LOGGER
    assert package_logger.level == logging.WARNING
    assert package_logger.propagate is False
    assert logging.getLogger().handlers == root_handlers


def test_setup_logging_is_idempotent():
    """Repeated calls keep a single handler."""
    setup_logging()
    package_logger = setup_logging(debug=True)
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG


def test_setup_logging_writes_to_stderr(capsys):
    """Records go to stderr so stdout stays clean."""
    setup_logging(level="INFO")
    logging.getLogger("page_url.base_path").warning("wrong base")
    captured = capsys.readouterr()
    assert "wrong base" in captured.err
    assert captured.out == ""
