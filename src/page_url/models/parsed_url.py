"""Value objects produced by URL decomposition."""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ResolvedPathname(BaseModel):
    """Origin and resolved pathname of a URL without query and hash."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    origin: Optional[str] = Field(None, description="Scheme + authority, as written in the URL")
    pathname_resolved: str = Field(
        ...,
        alias="pathnameResolved",
        description="Root-relative path, dot segments removed, percent-encoded",
    )


class StripResult(BaseModel):
    """Pathname after removing the base path."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pathname: str = Field(..., description="Pathname without the base path")
    has_base_server: bool = Field(
        ..., alias="hasBaseServer", description="Whether the base path was present"
    )


class ParsedUrl(BaseModel):
    """Structured, round-trippable decomposition of a URL."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    origin: Optional[str] = Field(None, description="Scheme + authority, None for relative URLs")
    pathname: str = Field(..., description="Decoded pathname with the base path removed")
    pathname_original: str = Field(
        ..., alias="pathnameOriginal", description="Raw path as it appears in the URL"
    )
    has_base_server: bool = Field(
        ..., alias="hasBaseServer", description="Whether the base path was present"
    )
    search: Dict[str, str] = Field(
        default_factory=dict, description="Query parameters, last value wins"
    )
    search_all: Dict[str, List[str]] = Field(
        default_factory=dict, alias="searchAll", description="All values per query parameter"
    )
    search_original: Optional[str] = Field(
        None, alias="searchOriginal", description="Raw query string including '?'"
    )
    hash: str = Field("", description="Decoded fragment")
    hash_original: Optional[str] = Field(
        None, alias="hashOriginal", description="Raw fragment including '#'"
    )

    @property
    def href(self) -> str:
        """Reassemble the URL from its original parts."""
        return (
            f"{self.origin or ''}{self.pathname_original}"
            f"{self.search_original or ''}{self.hash_original or ''}"
        )
