"""Keyword extraction and normalization for items and queries."""

import re
from typing import Callable, Iterable, List, Optional

KeywordsExtractor = Callable[[str], Iterable[str]]
KeywordNormalizer = Callable[[str], str]

DEFAULT_MINIMUM_KEYWORD_LENGTH = 2

_NON_WORD_RUN = re.compile(r"\W+")


def default_keywords_extractor(text: str) -> List[str]:
    """
    Split free-form text on any run of non-word characters.

    Both "one two,three-four" and "one$two%three^four" produce
    ["one", "two", "three", "four"].
    """
    return [token for token in _NON_WORD_RUN.split(text) if token]


def default_keyword_normalizer(keyword: str) -> str:
    """Lowercase and trim a keyword."""
    return keyword.lower().strip()


class KeywordPreparer:
    """Turns raw keyword text into a clean, ordered, duplicate-free keyword list."""

    def __init__(
        self,
        keywords_extractor: Optional[KeywordsExtractor] = None,
        keyword_normalizer: Optional[KeywordNormalizer] = None,
        minimum_keyword_length: int = DEFAULT_MINIMUM_KEYWORD_LENGTH
    ) -> None:
        """
        Initialize the preparer.

        Args:
            keywords_extractor: Splits raw text into raw tokens
            keyword_normalizer: Maps each raw token to its indexed form
            minimum_keyword_length: Shortest keyword kept when filtering
        """
        self.keywords_extractor = keywords_extractor or default_keywords_extractor
        self.keyword_normalizer = keyword_normalizer or default_keyword_normalizer
        self.minimum_keyword_length = minimum_keyword_length

    def prepare(self, text: str, filter_short: bool) -> List[str]:
        """
        Extract and normalize keywords from text.

        Args:
            text: Raw keywords or query string
            filter_short: Drop keywords shorter than the minimum length
                (used for item keywords, not for queries)

        Returns:
            Keywords in first-seen order, without duplicates
        """
        if not text:
            return []

        keywords = {}
        for token in self.keywords_extractor(text):
            keyword = self.keyword_normalizer(token)
            if not keyword:
                continue
            if filter_short and len(keyword) < self.minimum_keyword_length:
                continue
            keywords[keyword] = None

        return list(keywords)
