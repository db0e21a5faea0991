"""Response models for augmented searches."""

from datetime import datetime, timezone
from typing import Any, List, Set

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SearchResult(BaseModel):
    """Individual search result."""

    item: Any = Field(..., description="The matched item")
    keywords: Set[str] = Field(..., description="All keywords the item is indexed under")
    score: float = Field(..., description="Accumulated match score, higher is better")


class SearchResponse(BaseModel):
    """Response for augmented searches."""

    query: str = Field(..., description="Original search string")
    results: List[SearchResult] = Field(default_factory=list, description="Results, best first")
    execution_time_ms: float = Field(default=0.0, description="Query execution time in milliseconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")

    @property
    def total_results(self) -> int:
        """Number of results returned."""
        return len(self.results)

    @property
    def items(self) -> List[Any]:
        """Result items, best first."""
        return [result.item for result in self.results]
