"""Split a URL (without query and hash) into origin and resolved pathname."""

import logging
import re
from typing import List, Optional
from urllib.parse import quote, urlsplit

from .assertions import assert_internal
from .models.parsed_url import ResolvedPathname
from .types import AmbientBaseProvider

logger = logging.getLogger(__name__)

# Authority used to resolve relative URLs when no document base URL is available
SYNTHETIC_ORIGIN = "http://fake.example.org"

_ABSOLUTE_URL_RE = re.compile(r"^(?P<origin>[A-Za-z][A-Za-z0-9+.\-]*://[^/?#]+)(?P<path>.*)$", re.DOTALL)

# Printable ASCII left as-is in a path by the WHATWG URL parser ('%' included,
# so existing escapes survive); everything else is percent-encoded.
_PATH_SAFE = "/!$%&'()*+,;=:@[]\\^|"
# Lone surrogates can't be encoded as UTF-8; the WHATWG parser emits U+FFFD
_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def _remove_dot_segments(path: str) -> str:
    """Resolve ``.`` and ``..`` segments of an absolute path (RFC 3986 5.2.4)."""
    segments = path.split("/")[1:]
    resolved: List[str] = []
    for segment in segments:
        if segment == ".":
            continue
        if segment == "..":
            if resolved:
                resolved.pop()
        else:
            resolved.append(segment)
    if segments[-1:] in (["."], [".."]):
        resolved.append("")
    return "/" + "/".join(resolved)


def _encode_path(path: str) -> str:
    return quote(_SURROGATE_RE.sub("\ufffd", path), safe=_PATH_SAFE)


def _parse_absolute(url: str) -> Optional[ResolvedPathname]:
    match = _ABSOLUTE_URL_RE.match(url)
    if match is None:
        return None
    try:
        # Raises ValueError on an invalid port
        urlsplit(url).port
    except ValueError:
        logger.debug(f"Not an absolute URL (invalid port): {url}")
        return None
    path = match.group("path") or "/"
    return ResolvedPathname(
        origin=match.group("origin"),
        pathname_resolved=_encode_path(_remove_dot_segments(path)),
    )


def _resolve_relative(reference: str, base_url: str) -> str:
    base_path = urlsplit(base_url).path or "/"
    if reference.startswith("/"):
        merged = reference
    elif reference == "":
        merged = base_path
    else:
        merged = base_path[: base_path.rfind("/") + 1] + reference
    return _encode_path(_remove_dot_segments(merged))


def resolve(
    url: str,
    base_server: str,
    ambient_base: Optional[AmbientBaseProvider] = None,
) -> ResolvedPathname:
    """
    Determine the origin and the resolved pathname of a URL.

    Args:
        url: URL without query string and hash
        base_server: Base path used to build the synthetic base URL
        ambient_base: Returns the document base URL in browser-like hosts

    Returns:
        ResolvedPathname; `origin` is None unless `url` is absolute

    Supported forms:
    - ``https://example.org/about`` -> origin + ``/about``
    - ``//cdn.example.org/x`` -> kept as a literal pathname
    - ``/about``, ``./about``, ``../about``, ``""`` -> resolved against the
      document base URL, or against ``SYNTHETIC_ORIGIN + base_server``
    """
    # Protocol-relative URLs aren't resolved against any authority
    if url.startswith("//"):
        resolved = ResolvedPathname(origin=None, pathname_resolved=url)
    else:
        parsed = _parse_absolute(url)
        if parsed is not None:
            resolved = parsed
        else:
            base_url = (ambient_base() if ambient_base is not None else None) or (
                SYNTHETIC_ORIGIN + base_server
            )
            resolved = ResolvedPathname(
                origin=None, pathname_resolved=_resolve_relative(url, base_url)
            )

    pathname = resolved.pathname_resolved
    assert_internal(
        pathname.startswith("/"),
        {"url": url, "pathname_resolved": pathname},
        "Resolved pathname must start with '/'",
    )
    assert_internal(
        "?" not in pathname and "#" not in pathname,
        {"url": url, "pathname_resolved": pathname},
        "Resolved pathname must not contain a query or hash",
    )
    return resolved
