"""page-url - URL decomposition and base path resolution for page routing."""

from .base_path import (
    normalize_base_assets,
    normalize_base_path,
    prepend,
    strip_base,
    validate_base_path,
)
from .exceptions import InternalAssertionError, PageUrlError, UsageError
from .models import BaseAssetsConfig, BaseServerConfig, ParsedUrl, ResolvedPathname, StripResult
from .parser import decompose
from .resolver import SYNTHETIC_ORIGIN, resolve
from .utils import decode_pathname, decode_safe, is_base_assets, is_parsable

__all__ = [
    "decompose",
    "is_parsable",
    "prepend",
    "strip_base",
    "resolve",
    "normalize_base_path",
    "normalize_base_assets",
    "validate_base_path",
    "is_base_assets",
    "decode_safe",
    "decode_pathname",
    "SYNTHETIC_ORIGIN",
    "ParsedUrl",
    "ResolvedPathname",
    "StripResult",
    "BaseServerConfig",
    "BaseAssetsConfig",
    "PageUrlError",
    "InternalAssertionError",
    "UsageError",
]
