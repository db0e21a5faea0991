"""
Quick Search - In-memory partial-match search for embedding in applications.

Items are tagged with free-form keywords and found again by partial or
incomplete queries with sub-millisecond latency, without running a separate
search server.
"""

__version__ = "1.0.0"

from .core.engine import QuickSearch
from .core.policies import AccumulationPolicy, UnmatchedPolicy
from .models.response import SearchResult, SearchResponse

__all__ = [
    "QuickSearch",
    "AccumulationPolicy",
    "UnmatchedPolicy",
    "SearchResult",
    "SearchResponse",
]
