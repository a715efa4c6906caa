"""URL utilities."""

from .decoding import decode_pathname, decode_safe
from .url_utils import is_base_assets, is_parsable, starts_with_scheme

__all__ = [
    "decode_pathname",
    "decode_safe",
    "is_base_assets",
    "is_parsable",
    "starts_with_scheme",
]
