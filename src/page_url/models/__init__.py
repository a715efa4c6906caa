"""Data models for page-url."""

from .base_config import BaseAssetsConfig, BaseServerConfig
from .parsed_url import ParsedUrl, ResolvedPathname, StripResult

__all__ = [
    "BaseAssetsConfig",
    "BaseServerConfig",
    "ParsedUrl",
    "ResolvedPathname",
    "StripResult",
]
