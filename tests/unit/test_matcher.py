"""Unit tests for fragment matching and scoring."""

import pytest
from quick_search.core.index import IndexManager
from quick_search.core.matcher import FragmentMatcher
from quick_search.core.policies import AccumulationPolicy, UnmatchedPolicy
from quick_search.core.scoring import default_match_scorer


class TestDefaultMatchScorer:
    """Test cases for the default scorer."""

    @pytest.mark.parametrize("fragment,expected", [
        ("pa", 1.25),
        ("swo", 0.375),
        ("assword", 0.875),
        ("password", 2.0),
    ])
    def test_scores(self, fragment, expected):
        """Test ratio scoring with the prefix boost."""
        assert default_match_scorer(fragment, "password") == pytest.approx(expected)

    def test_prefix_ranks_higher(self):
        """Test that a prefix beats an inner match of the same length."""
        assert default_match_scorer("ma", "manager") > default_match_scorer("na", "manager")


class TestFragmentMatcher:
    """Test cases for the FragmentMatcher class."""

    @pytest.fixture
    def index_manager(self):
        """Create an index with a few items."""
        manager = IndexManager()
        manager.add_item("A", ["alpha", "beta"])
        manager.add_item("B", ["alpha"])
        manager.add_item("T", ["terminator"])
        return manager

    def make_matcher(self, index_manager, **kwargs):
        return FragmentMatcher(index_manager, default_match_scorer, **kwargs)

    def test_direct_match(self, index_manager):
        """Test a fragment present in the index."""
        matcher = self.make_matcher(index_manager)

        scores = matcher.match_fragment("alp")

        assert list(scores) == ["A", "B"]
        assert scores["A"] == pytest.approx(3 / 5 + 1)

    def test_backtracking(self, index_manager):
        """Test that an unknown fragment is shortened until it matches."""
        matcher = self.make_matcher(index_manager, unmatched_policy=UnmatchedPolicy.BACKTRACKING)

        scores = matcher.match_fragment("termite")

        assert scores == {"T": pytest.approx(5 / 10 + 1)}

    def test_exact_policy(self, index_manager):
        """Test that the exact policy does not shorten fragments."""
        matcher = self.make_matcher(index_manager, unmatched_policy=UnmatchedPolicy.EXACT)

        assert matcher.match_fragment("termite") == {}
        assert list(matcher.match_fragment("termi")) == ["T"]

    def test_backtracking_gives_up_at_one_character(self, index_manager):
        """Test a fragment whose first character is unknown."""
        matcher = self.make_matcher(index_manager)

        assert matcher.match_fragment("xylophone") == {}
        assert matcher.match_fragment("x") == {}

    def test_max_score_per_item(self):
        """Test that one fragment counts once per item, at its best keyword."""
        manager = IndexManager()
        manager.add_item("Eve", ["management", "manager"])
        matcher = self.make_matcher(manager)

        scores = matcher.match_fragment("manag")

        assert scores == {"Eve": pytest.approx(5 / 7 + 1)}

    def test_intersection(self, index_manager):
        """Test that intersection keeps items matching every keyword."""
        matcher = self.make_matcher(
            index_manager, accumulation_policy=AccumulationPolicy.INTERSECTION
        )

        scores = matcher.match_and_score(["alpha", "beta"])

        assert scores == {"A": pytest.approx(4.0)}

    def test_union(self, index_manager):
        """Test that union keeps items matching any keyword."""
        matcher = self.make_matcher(index_manager, accumulation_policy=AccumulationPolicy.UNION)

        scores = matcher.match_and_score(["alpha", "beta"])

        assert scores == {"A": pytest.approx(4.0), "B": pytest.approx(2.0)}
        assert scores["A"] >= scores["B"]

    def test_union_with_unmatched_keyword(self, index_manager):
        """Test that an unmatched keyword contributes nothing under union."""
        matcher = self.make_matcher(
            index_manager,
            unmatched_policy=UnmatchedPolicy.EXACT,
            accumulation_policy=AccumulationPolicy.UNION
        )

        scores = matcher.match_and_score(["zzz", "beta"])

        assert scores == {"A": pytest.approx(2.0)}

    def test_intersection_stops_when_empty(self, index_manager):
        """Test that later keywords are not matched once nothing is left."""
        calls = []

        def scorer(fragment, keyword):
            calls.append(fragment)
            return default_match_scorer(fragment, keyword)

        matcher = FragmentMatcher(
            index_manager,
            scorer,
            unmatched_policy=UnmatchedPolicy.EXACT,
            accumulation_policy=AccumulationPolicy.INTERSECTION
        )

        assert matcher.match_and_score(["zzz", "alpha"]) == {}
        assert calls == []

        assert matcher.match_and_score(["beta", "terminator", "alpha"]) == {}
        assert "alpha" not in calls

    def test_no_fragments(self, index_manager):
        """Test matching an empty query."""
        matcher = self.make_matcher(index_manager)
        assert matcher.match_and_score([]) == {}
