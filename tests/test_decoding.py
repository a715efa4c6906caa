"""Tests for safe percent-decoding."""

import pytest
from page_url.utils.decoding import decode_pathname, decode_safe


def test_decode_safe_decodes_utf8():
    """Well-formed UTF-8 escapes are decoded."""
    assert decode_safe("h%C3%A9llo%20world") == "héllo world"


def test_decode_safe_decodes_reserved_characters():
    """Reserved characters are decoded like decodeURIComponent does."""
    assert decode_safe("a%2Fb%3Fc%23d") == "a/b?c#d"


def test_decode_safe_keeps_plus():
    """'+' is not a space outside of query strings."""
    assert decode_safe("a+b") == "a+b"


def test_decode_safe_stray_percent():
    """A '%' that doesn't start an escape is kept, other escapes still decode."""
    assert decode_safe("100%") == "100%"
    assert decode_safe("50% off%21") == "50% off!"


def test_decode_safe_invalid_utf8():
    """Escapes that aren't valid UTF-8 are left as-is."""
    assert decode_safe("%E9") == "%E9"
    assert decode_safe("%E0%A4%A") == "%E0%A4%A"
    assert decode_safe("caf%E9-%C3%A9") == "caf%E9-é"


def test_decode_safe_never_raises():
    """Garbage input comes back unchanged."""
    for value in ["%", "%%", "%ZZ", "%C3", "%FF%FE"]:
        assert decode_safe(value) == value


def test_decode_pathname_preserves_encoded_slash():
    """A decoded '/' is escaped back so segments don't split."""
    assert decode_pathname("/a%2Fb/c") == "/a%2Fb/c"
    assert decode_pathname("/a%2Fb/c").split("/") == ["", "a%2Fb", "c"]


def test_decode_pathname_normalizes_lowercase_slash_escape():
    """Lowercase %2f is re-escaped as %2F."""
    assert decode_pathname("/a%2fb") == "/a%2Fb"


@pytest.mark.parametrize(
    "pathname,expected",
    [
        ("/", "/"),
        ("/x%20y/", "/x y/"),
        ("/h%C3%A9llo", "/héllo"),
        ("/%ZZ/ok%21", "/%ZZ/ok!"),
        ("/a%3Fb", "/a?b"),
    ],
)
def test_decode_pathname(pathname, expected):
    """Each segment is decoded independently."""
    assert decode_pathname(pathname) == expected
