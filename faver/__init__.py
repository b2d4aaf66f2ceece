"""
faver package initializer.
Defines package version and exposes the favicon fetching API.
"""
__version__ = "0.1.0"

from faver.engine import FaviconFetcher, TargetResult, fetch_all, fetch_favicons  # noqa: E402
from faver.errors import (  # noqa: E402
    FaverError,
    FetchError,
    NotFoundError,
    ParseError,
    ValidationError,
)

__all__ = [
    "__version__",
    "FaviconFetcher",
    "TargetResult",
    "fetch_all",
    "fetch_favicons",
    "FaverError",
    "FetchError",
    "NotFoundError",
    "ParseError",
    "ValidationError",
]
