"""Percent-decoding that never fails."""

import logging
import re
from typing import Callable, Tuple
from urllib.parse import unquote, unquote_to_bytes

logger = logging.getLogger(__name__)

_STRAY_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_ESCAPE_RUN_RE = re.compile(r"(?:%[0-9A-Fa-f]{2})+")


def _decode_strict(value: str) -> str:
    if _STRAY_PERCENT_RE.search(value):
        raise ValueError(f"Malformed percent-escape in {value!r}")
    return unquote(value, encoding="utf-8", errors="strict")


def _decode_run(match: "re.Match[str]") -> str:
    run = match.group(0)
    try:
        return unquote_to_bytes(run).decode("utf-8")
    except UnicodeDecodeError:
        return run


def _decode_lenient(value: str) -> str:
    return _ESCAPE_RUN_RE.sub(_decode_run, value)


_DECODERS: Tuple[Callable[[str], str], ...] = (_decode_strict, _decode_lenient)


def decode_safe(value: str) -> str:
    """
    Percent-decode a URL component, returning the best available decoding.

    Attempts, in order:
    1. Strict decoding: every ``%`` must start a ``%XX`` escape and the
       decoded bytes must be valid UTF-8.
    2. Lenient decoding: runs of well-formed escapes are decoded when they
       form valid UTF-8, everything else is kept literally.
    3. The input unchanged.

    ``+`` is not treated as a space.
    """
    for decoder in _DECODERS:
        try:
            return decoder(value)
        except ValueError as e:
            logger.debug(f"{decoder.__name__} failed: {e}")
    return value


def decode_pathname(pathname: str) -> str:
    """
    Decode a pathname segment by segment.

    A ``/`` produced by decoding a segment (``%2F``) is escaped back to
    ``%2F`` so it never adds a path boundary.

    Example:
        /a%2Fb/h%C3%A9llo -> /a%2Fb/héllo
    """
    return "/".join(
        decode_safe(segment).replace("/", "%2F")
        for segment in pathname.split("/")
    )
