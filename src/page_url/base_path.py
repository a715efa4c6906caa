"""Base path handling: normalization, validation, stripping and prepending."""

import logging

from .assertions import assert_internal, assert_usage
from .models.parsed_url import StripResult
from .utils.url_utils import is_base_assets, starts_with_scheme

logger = logging.getLogger(__name__)


def validate_base_path(base: str, message_prefix: str = "") -> None:
    """
    Check a user-supplied base path, typically once at startup.

    Args:
        base: Configured mount path, e.g. ``/app/``
        message_prefix: Prepended to the error message (e.g. the config file name)

    Raises:
        UsageError: If `base` starts with a URL scheme or doesn't start with ``/``
    """
    assert_usage(
        not starts_with_scheme(base),
        message_prefix
        + f"`base` is not allowed to start with a URL scheme (got `{base}`). "
        "Use `baseAssets` to serve assets from another origin.",
    )
    assert_usage(
        base.startswith("/"),
        message_prefix + f"Wrong `base` value `{base}`; `base` should start with `/`.",
    )


def assert_base_path(base: str) -> None:
    assert_internal(base.startswith("/"), {"base": base}, "Base path must start with '/'")


def _assert_url_pathname(pathname: str) -> None:
    assert_internal(
        pathname.startswith("/") and "?" not in pathname and "#" not in pathname,
        {"pathname": pathname},
        "Pathname must start with '/' and contain no query or hash",
    )


def normalize_base_path(base: str) -> str:
    """
    Drop the trailing slash of a base path, except for the root ``/``.

    Example:
        /app/ -> /app
    """
    normalized = base
    if normalized.endswith("/") and normalized != "/":
        normalized = normalized[:-1]
    assert_internal(
        not normalized.endswith("/") or normalized == "/",
        {"base": base, "normalized": normalized},
        "Base path contains '/' doublets",
    )
    return normalized


def normalize_base_assets(base: str) -> str:
    """Drop the trailing slash of an asset origin (``https://cdn.example.com/``)."""
    normalized = base
    if normalized.endswith("/"):
        normalized = normalized[:-1]
    assert_internal(
        not normalized.endswith("/"),
        {"base": base, "normalized": normalized},
        "Asset base contains '/' doublets",
    )
    return normalized


def strip_base(pathname: str, base_server: str) -> StripResult:
    """
    Remove the base path from a resolved pathname.

    The base path is compared without its trailing slash, so ``/app`` is
    under base ``/app/``. The match is a literal string prefix: ``/appx``
    is under ``/app/`` too.

    Args:
        pathname: Resolved pathname (no query, no hash)
        base_server: Configured base path, possibly with a trailing slash

    Returns:
        StripResult with the remaining pathname and whether the base matched
    """
    _assert_url_pathname(pathname)
    assert_base_path(base_server)

    if base_server == "/":
        return StripResult(pathname=pathname, has_base_server=True)

    base = normalize_base_path(base_server)
    if not pathname.startswith(base):
        return StripResult(pathname=pathname, has_base_server=False)

    remainder = pathname[len(base):]
    if not remainder.startswith("/"):
        remainder = "/" + remainder
    return StripResult(pathname=remainder, has_base_server=True)


def prepend(url: str, base: str) -> str:
    """
    Mount a root-relative URL under a base path or an asset origin.

    Examples:
        prepend("/about", "/app/") -> /app/about
        prepend("/img.png", "https://cdn.example.com/") -> https://cdn.example.com/img.png
    """
    assert_internal(url.startswith("/"), {"url": url, "base": base}, "URL must start with '/'")

    if is_base_assets(base):
        return normalize_base_assets(base) + url

    assert_base_path(base)
    normalized = normalize_base_path(base)
    if normalized == "/":
        return url
    return normalized + url
