"""Custom exception classes for page-url."""

from typing import Any, Dict, Optional


class PageUrlError(Exception):
    """Base exception for page-url errors."""

    def __init__(self, message: str, code: str = "internal", detail: str = ""):
        self.message = message
        self.code = code
        self.detail = detail
        super().__init__(message)


class InternalAssertionError(PageUrlError):
    """
    An internal invariant did not hold.

    Indicates a defect in the library (or a caller passing a URL that
    `is_parsable()` rejects), never a malformed URL sent by a client.
    """

    def __init__(
        self,
        message: str = "Internal assertion failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.context = dict(context or {})
        detail = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        super().__init__(
            f"{message} ({detail})" if detail else message,
            code="assertion_failed",
            detail=detail,
        )


class UsageError(PageUrlError):
    """Misconfiguration by the embedding application (e.g. a wrong base path)."""

    def __init__(self, message: str):
        super().__init__(message, code="usage")
