"""
Tests for the rapidfuzz-backed fuzzy ranker.
"""
import pytest

from advsearch.core.fuzzy_ranker import (
    ScoredCandidate,
    extract_all,
    rank,
    weighted_ratio,
)


def one(text):
    return [text]


def test_weighted_ratio_identical_strings():
    assert weighted_ratio("apple", "apple") == 100


def test_weighted_ratio_bounds():
    for text in ["apple", "application", "grape", "zzz"]:
        assert 0 <= weighted_ratio("aple", text) <= 100


def test_weighted_ratio_empty_input_scores_zero():
    assert weighted_ratio("", "apple") == 0
    assert weighted_ratio("apple", "") == 0


def test_weighted_ratio_cutoff():
    """Scores below the cutoff are reported as 0."""
    assert weighted_ratio("appel", "apple") == pytest.approx(80)
    assert weighted_ratio("appel", "apple", score_cutoff=90) == 0


def test_weighted_ratio_processor():
    assert weighted_ratio("APPLE", "apple") == 0
    assert weighted_ratio("APPLE", "apple", processor=str.casefold) == 100


def test_weighted_ratio_more_edits_score_lower():
    close = weighted_ratio("apple", "appla")
    far = weighted_ratio("apple", "axpla")
    assert 100 > close > far


@pytest.mark.unit
class TestExtractAll:
    """Tests for batch scoring."""

    def test_scores_in_input_order(self):
        scored = extract_all("apple", ["grape", "apple", "appel"], one, min_score=50)

        assert [item.candidate for item in scored] == ["grape", "apple", "appel"]
        assert [item.index for item in scored] == [0, 1, 2]
        assert scored[1].score == 100

    def test_below_threshold_dropped(self):
        scored = extract_all("apple", ["apple", "zzzzz"], one, min_score=50)
        assert [item.candidate for item in scored] == ["apple"]

    def test_best_facet_wins(self):
        candidates = [("x", ["zzzz", "apple"]), ("y", ["appel"])]
        scored = extract_all("apple", candidates, lambda c: c[1], min_score=50)

        by_key = {item.candidate[0]: item.score for item in scored}
        assert by_key["x"] == 100
        assert by_key["y"] == pytest.approx(80)

    def test_candidate_reported_once(self):
        scored = extract_all("apple", [["apple", "apple", "appl"]], lambda c: c, min_score=50)
        assert len(scored) == 1

    def test_candidates_without_facets(self):
        assert extract_all("apple", [[], []], lambda c: c, min_score=0) == []
        assert extract_all("apple", [], one, min_score=50) == []

    def test_empty_query_matches_nothing(self):
        """Even with a zero threshold, a zero score is not a match."""
        assert extract_all("", ["apple", "grape"], one, min_score=0) == []

    def test_processor_applied_to_query_and_facets(self):
        scored = extract_all(
            "APPLE", ["apple"], one, min_score=50, processor=str.casefold
        )
        assert scored[0].score == 100


def test_rank_descending_and_stable():
    scored = [
        ScoredCandidate("a", 60.0, 0),
        ScoredCandidate("b", 90.0, 1),
        ScoredCandidate("c", 60.0, 2),
        ScoredCandidate("d", 90.0, 3),
    ]
    assert rank(scored) == ["b", "d", "a", "c"]


def test_rank_empty():
    assert rank([]) == []
