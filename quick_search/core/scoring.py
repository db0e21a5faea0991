"""Scoring of query fragments against indexed keywords."""

from typing import Callable

MatchScorer = Callable[[str, str], float]


def default_match_scorer(fragment: str, keyword: str) -> float:
    """
    Score a matched query fragment against the keyword containing it.

    The score is the fragment to keyword length ratio, plus 1.0 when the
    keyword starts with the fragment. Against "password":

    - "pa" -> 0.25 + 1.0
    - "swo" -> 0.375
    - "assword" -> 0.875
    - "password" -> 1.0 + 1.0

    Args:
        fragment: Query fragment (possibly shortened by backtracking)
        keyword: Indexed keyword containing the fragment

    Returns:
        Match score, higher is better
    """
    score = len(fragment) / len(keyword)

    if keyword.startswith(fragment):
        score += 1.0

    return score
