"""Matching and accumulation policies."""

from enum import Enum


class UnmatchedPolicy(str, Enum):
    """What to do with a query keyword that has no direct fragment match.

    EXACT drops it. BACKTRACKING shortens it one trailing character at a time
    until it matches something (e.g. 'terminal' reaches 'ter' and matches 'terra').
    """

    EXACT = "exact"
    BACKTRACKING = "backtracking"


class AccumulationPolicy(str, Enum):
    """How candidates found for several query keywords are combined.

    UNION keeps items matched by any keyword, INTERSECTION only items matched
    by all of them.
    """

    UNION = "union"
    INTERSECTION = "intersection"
