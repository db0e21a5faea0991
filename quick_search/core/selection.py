"""Top-N selection of scored candidates."""

from operator import itemgetter
from typing import Any, Callable, Hashable, Iterable, List, Tuple, TypeVar

X = TypeVar("X")

ScoredItem = Tuple[Hashable, float]

_score = itemgetter(1)


def sort_and_limit(
    candidates: Iterable[X],
    limit: int,
    key: Callable[[X], Any]
) -> List[X]:
    """
    Select the highest ranked candidates in descending key order.

    Candidates that cannot make the cut are discarded on sight, which avoids
    sorting the whole collection when only the first few are needed. Equal
    keys keep their input order, so the result matches the first ``limit``
    elements of ``sorted(candidates, key=key, reverse=True)``.

    Args:
        candidates: Candidates in any order
        limit: Maximum number of candidates to return
        key: Ranking key, higher ranks first

    Returns:
        Up to ``limit`` candidates, best first
    """
    if limit <= 0:
        return []

    result: List[X] = []
    for candidate in candidates:
        if len(result) < limit:
            _insert_in_order(result, candidate, key)
        elif key(candidate) > key(result[-1]):
            _insert_in_order(result, candidate, key)
            result.pop()

    return result


def _insert_in_order(result: List[X], candidate: X, key: Callable[[X], Any]) -> None:
    candidate_key = key(candidate)
    for pos, entry in enumerate(result):
        if candidate_key > key(entry):
            result.insert(pos, candidate)
            return
    result.append(candidate)


def top_n(candidates: Iterable[ScoredItem], n: int) -> List[ScoredItem]:
    """
    Get the ``n`` best ``(item, score)`` pairs by descending score.

    Args:
        candidates: Scored candidates in any order
        n: Number of pairs to return

    Returns:
        Up to ``n`` pairs, best first
    """
    return sort_and_limit(candidates, n, _score)
