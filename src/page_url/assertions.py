"""Assertion helpers that survive ``python -O``."""

import logging
from typing import Any, Dict, Optional

from .exceptions import InternalAssertionError, UsageError

logger = logging.getLogger(__name__)


def assert_internal(
    condition: bool,
    context: Optional[Dict[str, Any]] = None,
    message: str = "Internal assertion failed",
) -> None:
    """
    Raise InternalAssertionError when an internal invariant is broken.

    Args:
        condition: The invariant that must hold
        context: Offending input and intermediate values, for diagnostics
        message: Short description of the broken invariant
    """
    if condition:
        return
    error = InternalAssertionError(message, context=context)
    logger.error(error.message)
    raise error


def assert_usage(condition: bool, message: str) -> None:
    """Raise UsageError with an actionable message when a configuration value is wrong."""
    if condition:
        return
    logger.warning(f"Usage error: {message}")
    raise UsageError(message)
