"""Main quick search implementation."""

import threading
import time
from collections.abc import Mapping
from operator import itemgetter
from typing import Any, Hashable, Iterable, List, Optional, Tuple, Union

import structlog

from ..config import Settings, get_settings
from ..models.response import SearchResult, SearchResponse
from .index import IndexManager
from .matcher import FragmentMatcher
from .normalizer import (
    DEFAULT_MINIMUM_KEYWORD_LENGTH,
    KeywordNormalizer,
    KeywordPreparer,
    KeywordsExtractor,
    default_keyword_normalizer,
    default_keywords_extractor,
)
from .policies import AccumulationPolicy, UnmatchedPolicy
from .scoring import MatchScorer, default_match_scorer
from .selection import ScoredItem, top_n

logger = structlog.get_logger(__name__)

ItemsSource = Union[Mapping, Iterable[Tuple[Hashable, str]]]

DEFAULT_MAX_RESULTS = 10


class QuickSearch:
    """
    In-memory partial-match search over items tagged with free-form keywords.

    Every keyword is indexed by all of its substrings, so a query like "mana"
    finds items tagged "Manager". Items must be hashable and must keep their
    hash while indexed.

    All public methods hold a single instance lock, so an instance can be
    shared between threads.

    Example:
        >>> qs = QuickSearch()
        >>> qs.add_item("Villain", "Roy Batty Lord Voldemort Colonel Kurtz")
        True
        >>> qs.add_item("Hero", "Walt Kowalski Jake Blues Shaun")
        True
        >>> qs.find_item("walk")
        'Hero'
    """

    def __init__(
        self,
        keywords_extractor: KeywordsExtractor = default_keywords_extractor,
        keyword_normalizer: KeywordNormalizer = default_keyword_normalizer,
        keyword_match_scorer: MatchScorer = default_match_scorer,
        minimum_keyword_length: int = DEFAULT_MINIMUM_KEYWORD_LENGTH,
        unmatched_policy: UnmatchedPolicy = UnmatchedPolicy.BACKTRACKING,
        candidate_accumulation_policy: AccumulationPolicy = AccumulationPolicy.UNION,
        default_max_results: int = DEFAULT_MAX_RESULTS
    ) -> None:
        """
        Initialize the search index.

        Args:
            keywords_extractor: Splits raw text into raw keywords
            keyword_normalizer: Cleans up a single keyword, empty result drops it
            keyword_match_scorer: Scores a query fragment against a keyword
            minimum_keyword_length: Item keywords shorter than this are ignored
            unmatched_policy: Handling of query keywords without a direct match
            candidate_accumulation_policy: Combination of multi-keyword results
            default_max_results: Result limit for finds called without one

        Raises:
            ValueError: If any argument is missing or invalid
        """
        if not callable(keywords_extractor):
            raise ValueError("keywords_extractor must be callable")
        if not callable(keyword_normalizer):
            raise ValueError("keyword_normalizer must be callable")
        if not callable(keyword_match_scorer):
            raise ValueError("keyword_match_scorer must be callable")
        if (
            not isinstance(minimum_keyword_length, int)
            or isinstance(minimum_keyword_length, bool)
            or minimum_keyword_length < 1
        ):
            raise ValueError("minimum_keyword_length must be an integer of at least 1")
        if not isinstance(unmatched_policy, UnmatchedPolicy):
            raise ValueError(f"Invalid unmatched policy: {unmatched_policy!r}")
        if not isinstance(candidate_accumulation_policy, AccumulationPolicy):
            raise ValueError(f"Invalid accumulation policy: {candidate_accumulation_policy!r}")
        if (
            not isinstance(default_max_results, int)
            or isinstance(default_max_results, bool)
            or default_max_results < 1
        ):
            raise ValueError("default_max_results must be an integer of at least 1")

        self.unmatched_policy = unmatched_policy
        self.candidate_accumulation_policy = candidate_accumulation_policy
        self.default_max_results = default_max_results

        self.preparer = KeywordPreparer(
            keywords_extractor, keyword_normalizer, minimum_keyword_length
        )
        self.index_manager = IndexManager()
        self.matcher = FragmentMatcher(
            self.index_manager,
            keyword_match_scorer,
            unmatched_policy,
            candidate_accumulation_policy
        )
        self._lock = threading.RLock()

        logger.debug(
            "Quick search index created",
            minimum_keyword_length=minimum_keyword_length,
            unmatched_policy=unmatched_policy.value,
            candidate_accumulation_policy=candidate_accumulation_policy.value,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **overrides: Any) -> "QuickSearch":
        """
        Create an index configured from settings.

        Args:
            settings: Settings to use (cached environment settings if None)
            **overrides: Constructor arguments taking precedence over settings

        Returns:
            A new QuickSearch instance
        """
        settings = settings or get_settings()
        kwargs = {
            "minimum_keyword_length": settings.minimum_keyword_length,
            "unmatched_policy": settings.unmatched_policy,
            "candidate_accumulation_policy": settings.candidate_accumulation_policy,
            "default_max_results": settings.default_max_results,
        }
        kwargs.update(overrides)
        return cls(**kwargs)

    def add_item(self, item: Optional[Hashable], keywords: Optional[str]) -> bool:
        """
        Add an item with its keywords.

        Adding a known item again maps any new keywords to it as well.

        Args:
            item: Item to return in search results
            keywords: Free-form keywords, e.g. "Shoe Red 10 Converse cheap"

        Returns:
            True if added, False if no usable keywords were found
        """
        if item is None or keywords is None:
            return False

        with self._lock:
            return self.index_manager.add_item(item, self.preparer.prepare(keywords, True))

    def load_items(self, items: ItemsSource) -> int:
        """
        Add many items at once.

        Args:
            items: Mapping of item to keywords, or iterable of (item, keywords) pairs

        Returns:
            Number of items added
        """
        pairs = items.items() if isinstance(items, Mapping) else items

        with self._lock:
            added = sum(1 for item, keywords in pairs if self.add_item(item, keywords))
            stats = self.get_stats()

        logger.info("Items loaded", added=added, stats=stats)
        return added

    def remove_item(self, item: Optional[Hashable]) -> bool:
        """
        Remove an item and its keyword mappings.

        Args:
            item: Item to remove

        Returns:
            True if removed, False if not found
        """
        if item is None:
            return False

        with self._lock:
            return self.index_manager.remove_item(item)

    def find_item(self, query: Optional[str]) -> Optional[Any]:
        """
        Find the best matching item.

        Args:
            query: Raw search string

        Returns:
            The top scoring item, or None
        """
        if query is None:
            return None

        with self._lock:
            items = self.find_items(query, 1)
            return items[0] if items else None

    def find_items(self, query: Optional[str], max_results: Optional[int] = None) -> List[Any]:
        """
        Find the best matching items.

        The query goes through the same extraction and normalization as item
        keywords, but short query keywords are kept.

        Args:
            query: Raw search string, e.g. "new york pizza"
            max_results: Maximum number of items to return
                (default_max_results if None)

        Returns:
            Up to max_results items, best first
        """
        if max_results is None:
            max_results = self.default_max_results
        if query is None or max_results < 1:
            return []

        with self._lock:
            return [item for item, _ in self._find_scored(query, max_results)]

    def find_augmented_item(self, query: Optional[str]) -> SearchResponse:
        """Find the best matching item along with its keywords and score."""
        return self.find_augmented_items(query, 1)

    def find_augmented_items(
        self,
        query: Optional[str],
        max_results: Optional[int] = None
    ) -> SearchResponse:
        """
        Find the best matching items along with their keywords and scores.

        Args:
            query: Raw search string
            max_results: Maximum number of results (default_max_results if None)

        Returns:
            SearchResponse with 0 to max_results results
        """
        start_time = time.time()
        query = query or ""
        if max_results is None:
            max_results = self.default_max_results
        if max_results < 1:
            return SearchResponse(query=query)

        with self._lock:
            results = [
                SearchResult(
                    item=item,
                    keywords=set(self.index_manager.keywords_for_item(item)),
                    score=score
                )
                for item, score in self._find_scored(query, max_results)
            ]

        return SearchResponse(
            query=query,
            results=results,
            execution_time_ms=(time.time() - start_time) * 1000
        )

    def clear(self) -> None:
        """Remove all items."""
        with self._lock:
            self.index_manager.clear()
        logger.info("Quick search index cleared")

    def get_stats(self) -> str:
        """
        Get a human-readable summary of the index size.

        Returns:
            e.g. "10 items; 100 keywords; 10000 fragments"
        """
        with self._lock:
            stats = self.index_manager.get_stats()
        return f"{stats['items']} items; {stats['keywords']} keywords; {stats['fragments']} fragments"

    def _find_scored(self, query: str, max_results: int) -> List[ScoredItem]:
        keywords = self.preparer.prepare(query, False)
        if not keywords:
            return []

        candidates = self.matcher.match_and_score(keywords)

        if len(candidates) > max_results:
            return top_n(candidates.items(), max_results)
        return sorted(candidates.items(), key=itemgetter(1), reverse=True)
