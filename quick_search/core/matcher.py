"""Fragment matching and per-item score accumulation."""

from typing import Dict, Hashable, Iterable

from .index import IndexManager
from .policies import AccumulationPolicy, UnmatchedPolicy
from .scoring import MatchScorer

Scores = Dict[Hashable, float]


class FragmentMatcher:
    """Matches query keywords against the fragment index and scores items."""

    def __init__(
        self,
        index_manager: IndexManager,
        scorer: MatchScorer,
        unmatched_policy: UnmatchedPolicy = UnmatchedPolicy.BACKTRACKING,
        accumulation_policy: AccumulationPolicy = AccumulationPolicy.UNION
    ) -> None:
        """
        Initialize the matcher.

        Args:
            index_manager: Index to match against
            scorer: Scores a matched fragment against a keyword
            unmatched_policy: Handling of query keywords with no direct match
            accumulation_policy: How results for several query keywords combine
        """
        self.index_manager = index_manager
        self.scorer = scorer
        self.unmatched_policy = unmatched_policy
        self.accumulation_policy = accumulation_policy

    def match_fragment(self, fragment: str) -> Scores:
        """
        Find and score items matching a single query keyword.

        Under backtracking an unknown fragment is shortened by one trailing
        character at a time until it matches or is a single character, so
        'termite' ends up matching 'terminator' as 'termi'.

        Args:
            fragment: Normalized query keyword

        Returns:
            Item to best score over the item's keywords containing the fragment
        """
        backtracking = self.unmatched_policy is UnmatchedPolicy.BACKTRACKING

        keywords = self.index_manager.lookup_fragment(fragment)
        while keywords is None:
            if not backtracking or len(fragment) <= 1:
                return {}
            fragment = fragment[:-1]
            keywords = self.index_manager.lookup_fragment(fragment)

        return self._score_fragment(fragment, keywords)

    def _score_fragment(self, fragment: str, keywords: Iterable[str]) -> Scores:
        scores: Scores = {}

        for keyword in keywords:
            score = self.scorer(fragment, keyword)
            for item in self.index_manager.items_for_keyword(keyword):
                # one query keyword counts once per item, however many keywords it hits
                previous = scores.get(item)
                if previous is None or score > previous:
                    scores[item] = score

        return scores

    def match_and_score(self, fragments: Iterable[str]) -> Scores:
        """
        Match every query keyword and accumulate item scores.

        Args:
            fragments: Normalized query keywords in query order

        Returns:
            Item to summed score over the query keywords that matched it
        """
        intersection = self.accumulation_policy is AccumulationPolicy.INTERSECTION

        matching: Scores = {}
        first = True
        for fragment in fragments:
            fragment_scores = self.match_fragment(fragment)

            if first:
                matching = fragment_scores
                first = False
            elif intersection:
                matching = {
                    item: score + fragment_scores[item]
                    for item, score in matching.items()
                    if item in fragment_scores
                }
            else:
                for item, score in fragment_scores.items():
                    matching[item] = matching.get(item, 0.0) + score

            # no later keyword can bring back dropped candidates
            if intersection and not matching:
                break

        return matching
