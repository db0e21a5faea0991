"""Data models for quick search."""

from .response import SearchResult, SearchResponse

__all__ = [
    "SearchResult",
    "SearchResponse",
]
