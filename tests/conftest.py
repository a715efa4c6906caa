"""Shared pytest fixtures."""

import logging

import pytest
from page_url.logging_config import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() so handlers bound to CliRunner streams don't leak."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
