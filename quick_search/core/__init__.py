"""Core search index functionality."""

from .engine import QuickSearch
from .index import FragmentIndex, ForwardIndex, IndexManager, ReverseIndex
from .matcher import FragmentMatcher
from .normalizer import KeywordPreparer, default_keyword_normalizer, default_keywords_extractor
from .policies import AccumulationPolicy, UnmatchedPolicy
from .scoring import default_match_scorer
from .selection import sort_and_limit, top_n

__all__ = [
    "QuickSearch",
    "FragmentIndex",
    "ForwardIndex",
    "ReverseIndex",
    "IndexManager",
    "FragmentMatcher",
    "KeywordPreparer",
    "default_keyword_normalizer",
    "default_keywords_extractor",
    "AccumulationPolicy",
    "UnmatchedPolicy",
    "default_match_scorer",
    "sort_and_limit",
    "top_n",
]
