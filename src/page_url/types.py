"""Common type definitions for page-url."""

from typing import Callable, Optional

# Returns the base URL of the current document (browser-like hosts), or None
AmbientBaseProvider = Callable[[], Optional[str]]
