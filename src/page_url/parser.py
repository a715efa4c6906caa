"""URL decomposition with base path detection."""

import logging
from typing import Dict, List, Optional
from urllib.parse import parse_qsl

from .assertions import assert_internal
from .base_path import assert_base_path, strip_base
from .models.parsed_url import ParsedUrl
from .resolver import resolve
from .types import AmbientBaseProvider
from .utils.decoding import decode_pathname, decode_safe
from .utils.url_utils import is_parsable

logger = logging.getLogger(__name__)


def decompose(
    url: str,
    base_server: str,
    ambient_base: Optional[AmbientBaseProvider] = None,
) -> ParsedUrl:
    """
    Decompose a URL into origin, pathname, query and hash.

    The original parts always reassemble into `url`:
    ``origin + pathname_original + search_original + hash_original``.

    Args:
        url: URL accepted by `is_parsable()`
        base_server: Base path the application is mounted on, e.g. ``/app/``
        ambient_base: Returns the document base URL in browser-like hosts

    Returns:
        ParsedUrl with `pathname` decoded and stripped of the base path

    Raises:
        InternalAssertionError: If `url` isn't parsable or an invariant breaks

    Example:
        /app/about?x=1&x=2#top with base /app/
        -> pathname=/about, search={x: 2}, search_all={x: [1, 2]}, hash=top
    """
    assert_internal(is_parsable(url), {"url": url}, "URL is not parsable")
    assert_base_path(base_server)

    # Hash
    url_without_hash, hash_sep, hash_body = url.partition("#")
    hash_original = hash_sep + hash_body if hash_sep else None
    hash_ = decode_safe(hash_body) if hash_sep else ""

    # Search
    url_without_search, search_sep, search_body = url_without_hash.partition("?")
    search_original = search_sep + search_body if search_sep else None
    search: Dict[str, str] = {}
    search_all: Dict[str, List[str]] = {}
    for key, value in parse_qsl(search_body, keep_blank_values=True):
        search[key] = value
        search_all.setdefault(key, []).append(value)

    # Origin + pathname
    resolved = resolve(url_without_search, base_server, ambient_base)
    origin = resolved.origin
    assert_internal(
        origin is None or url.startswith(origin),
        {"url": url, "origin": origin},
        "URL must start with its origin",
    )
    pathname_original = url_without_search[len(origin or ""):]

    url_recreated = f"{origin or ''}{pathname_original}{search_original or ''}{hash_original or ''}"
    assert_internal(
        url == url_recreated,
        {"url": url, "url_recreated": url_recreated},
        "URL doesn't round-trip",
    )

    # Base path
    stripped = strip_base(resolved.pathname_resolved, base_server)
    pathname = decode_pathname(stripped.pathname)
    assert_internal(
        pathname.startswith("/"),
        {"url": url, "pathname": pathname},
        "Pathname must start with '/'",
    )

    logger.debug(
        f"Decomposed {url!r} (base {base_server!r}): pathname={pathname!r}, "
        f"has_base_server={stripped.has_base_server}"
    )
    return ParsedUrl(
        origin=origin,
        pathname=pathname,
        pathname_original=pathname_original,
        has_base_server=stripped.has_base_server,
        search=search,
        search_all=search_all,
        search_original=search_original,
        hash=hash_,
        hash_original=hash_original,
    )
