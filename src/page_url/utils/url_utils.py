"""URL shape predicates shared by the parser and the base-path helpers."""

import re

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )  (RFC 3986)
SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
ABSOLUTE_ORIGIN_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


def is_parsable(url: str) -> bool:
    """
    Check whether `decompose()` accepts a URL.

    Accepted:
    - Absolute paths (/about)
    - Absolute URLs (https://example.org/about)
    - Dot-relative paths (./about, ../about)
    - Query-only (?page=2) and hash-only (#top) URLs
    - The empty string
    """
    return (
        url.startswith("/")
        or url.startswith("http")
        or url.startswith(".")
        or url.startswith("?")
        or url.startswith("#")
        or url == ""
    )


def starts_with_scheme(value: str) -> bool:
    """True if `value` begins with a URL scheme token (e.g. ``https:``)."""
    return SCHEME_RE.match(value) is not None


def is_base_assets(base: str) -> bool:
    """True if `base` is an absolute asset origin (e.g. ``https://cdn.example.com/``)."""
    return ABSOLUTE_ORIGIN_RE.match(base) is not None
