"""Application services - use case implementations."""

from .favicon_service import FaviconService

__all__ = [
    "FaviconService",
]
