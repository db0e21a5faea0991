"""Unit tests for top-N selection."""

import random
from operator import itemgetter

import pytest
from quick_search.core.selection import sort_and_limit, top_n


def full_sort(candidates, n):
    return sorted(candidates, key=itemgetter(1), reverse=True)[:n]


class TestTopN:
    """Test cases for the partial top-N sort."""

    def test_basic_order(self):
        """Test that the best candidates come first."""
        candidates = [("a", 1.0), ("b", 3.0), ("c", 2.0), ("d", 0.5)]
        assert top_n(candidates, 2) == [("b", 3.0), ("c", 2.0)]

    def test_zero_and_negative_limit(self):
        """Test that a non-positive limit selects nothing."""
        candidates = [("a", 1.0), ("b", 2.0)]
        assert top_n(candidates, 0) == []
        assert top_n(candidates, -3) == []

    def test_limit_larger_than_candidates(self):
        """Test a limit beyond the candidate count."""
        candidates = [("a", 1.0), ("b", 2.0)]
        assert top_n(candidates, 10) == [("b", 2.0), ("a", 1.0)]

    def test_empty(self):
        """Test selecting from no candidates."""
        assert top_n([], 5) == []

    def test_ties_keep_input_order(self):
        """Test that equal scores keep their input order."""
        candidates = [("a", 1.0), ("b", 2.0), ("c", 1.0), ("d", 2.0), ("e", 1.0)]
        assert top_n(candidates, 3) == [("b", 2.0), ("d", 2.0), ("a", 1.0)]
        assert top_n(candidates, 4) == [("b", 2.0), ("d", 2.0), ("a", 1.0), ("c", 1.0)]

    def test_accepts_iterators(self):
        """Test selecting from a one-shot iterable."""
        candidates = {"a": 1.0, "b": 2.0}
        assert top_n(iter(candidates.items()), 1) == [("b", 2.0)]

    @pytest.mark.parametrize("seed", range(20))
    def test_matches_full_sort(self, seed):
        """Test agreement with a stable full sort, ties included."""
        rng = random.Random(seed)
        size = rng.randint(0, 60)
        scores = [0.0, 0.5, 1.0, 1.25, 2.0, rng.random()]
        candidates = [(index, rng.choice(scores)) for index in range(size)]

        for n in range(size + 3):
            assert top_n(candidates, n) == full_sort(candidates, n)

    def test_custom_key(self):
        """Test ranking by an arbitrary key."""
        words = ["pear", "fig", "banana", "kiwi", "apple"]
        assert sort_and_limit(words, 3, key=len) == ["banana", "apple", "pear"]
