"""Tests for the per-candidate classification and aggregate assessment policy."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from event_similarity.errors import InvalidArgumentError
from event_similarity.matching.assessment import assess, classify
from event_similarity.matching.config import ThresholdConfig
from event_similarity.matching.models import Assessment, CandidateMatch


class TestClassify:
    """Tests for the threshold-based labelling."""

    def test_block(self) -> None:
        assert classify(0.90) is Assessment.BLOCK

    def test_warn(self) -> None:
        assert classify(0.70) is Assessment.WARN

    def test_low_risk(self) -> None:
        assert classify(0.30) is Assessment.LOW_RISK

    def test_clear(self) -> None:
        assert classify(0.0) is Assessment.CLEAR

    def test_exact_block_threshold(self) -> None:
        assert classify(0.85) is Assessment.BLOCK

    def test_exact_warn_threshold(self) -> None:
        assert classify(0.65) is Assessment.WARN

    def test_just_below_thresholds(self) -> None:
        assert classify(0.849) is Assessment.WARN
        assert classify(0.649) is Assessment.LOW_RISK

    def test_custom_thresholds(self) -> None:
        cfg = ThresholdConfig(block=0.95, warn=0.50)
        assert classify(0.90, cfg) is Assessment.WARN
        assert classify(0.95, cfg) is Assessment.BLOCK
        assert classify(0.49, cfg) is Assessment.LOW_RISK


class TestAssess:
    """Tests for aggregating candidates into one result."""

    def test_no_candidates(self) -> None:
        result = assess([], strict=False)
        assert result.has_duplicates is False
        assert result.assessment is Assessment.CLEAR
        assert result.matches == ()

    def test_block_candidate(self, make_match) -> None:
        result = assess([make_match("evt-1", 0.9)])
        assert result.assessment is Assessment.BLOCK
        assert result.has_duplicates is True
        assert [m.event_id for m in result.matches] == ["evt-1"]
        assert result.matches[0].assessment is Assessment.BLOCK

    def test_warn_lenient(self, make_match) -> None:
        result = assess([make_match("evt-1", 0.70)], strict=False)
        assert result.assessment is Assessment.WARN
        assert result.has_duplicates is False

    def test_warn_strict(self, make_match) -> None:
        result = assess([make_match("evt-1", 0.70)], strict=True)
        assert result.assessment is Assessment.WARN
        assert result.has_duplicates is True

    def test_block_lists_only_block_candidates(self, make_match) -> None:
        result = assess(
            [make_match("evt-1", 0.70), make_match("evt-2", 0.95), make_match("evt-3", 0.88)]
        )
        assert result.assessment is Assessment.BLOCK
        assert [m.event_id for m in result.matches] == ["evt-2", "evt-3"]

    def test_warn_strict_lists_only_warn_candidates(self, make_match) -> None:
        result = assess(
            [make_match("evt-1", 0.20), make_match("evt-2", 0.70), make_match("evt-3", 0.80)],
            strict=True,
        )
        assert [m.event_id for m in result.matches] == ["evt-3", "evt-2"]
        assert all(m.assessment is Assessment.WARN for m in result.matches)

    def test_warn_lenient_lists_all_candidates(self, make_match) -> None:
        result = assess(
            [make_match("evt-1", 0.20), make_match("evt-2", 0.70), make_match("evt-3", 0.0)],
            strict=False,
        )
        assert [m.event_id for m in result.matches] == ["evt-2", "evt-1", "evt-3"]

    def test_low_risk_lists_all_candidates(self, make_match) -> None:
        result = assess([make_match("evt-1", 0.10), make_match("evt-2", 0.40)], strict=True)
        assert result.assessment is Assessment.LOW_RISK
        assert result.has_duplicates is False
        assert [m.event_id for m in result.matches] == ["evt-2", "evt-1"]

    def test_all_zero_scores_is_clear(self, make_match) -> None:
        result = assess([make_match("evt-1", 0.0), make_match("evt-2", 0.0)])
        assert result.assessment is Assessment.CLEAR
        assert result.has_duplicates is False
        assert result.matches == ()

    def test_ties_ordered_by_event_id(self, make_match) -> None:
        forward = assess([make_match("evt-b", 0.9), make_match("evt-a", 0.9)])
        backward = assess([make_match("evt-a", 0.9), make_match("evt-b", 0.9)])
        assert [m.event_id for m in forward.matches] == ["evt-a", "evt-b"]
        assert forward == backward

    def test_relabels_from_score(self) -> None:
        """A stale label on the input is replaced by the threshold label."""
        stale = CandidateMatch(
            event_id="evt-1", title="Hackathon", score=0.9, assessment=Assessment.CLEAR
        )
        result = assess([stale])
        assert result.matches[0].assessment is Assessment.BLOCK
        assert stale.assessment is Assessment.CLEAR

    def test_custom_thresholds(self, make_match) -> None:
        cfg = ThresholdConfig(block=0.95, warn=0.90)
        result = assess([make_match("evt-1", 0.92)], thresholds=cfg)
        assert result.assessment is Assessment.WARN

    def test_top_match(self, make_match) -> None:
        result = assess([make_match("evt-1", 0.86), make_match("evt-2", 0.99)])
        assert result.top_match.event_id == "evt-2"
        assert result.top_score == 0.99

    @given(st.floats(min_value=0.85, max_value=1.0), st.booleans())
    def test_block_threshold_always_blocks(self, score: float, strict: bool) -> None:
        match = CandidateMatch(event_id="evt-1", title="t", score=score)
        assert assess([match], strict=strict).assessment is Assessment.BLOCK


class TestAssessInvalidInput:
    """Malformed input is rejected at the boundary."""

    def test_duplicate_event_ids(self, make_match) -> None:
        with pytest.raises(InvalidArgumentError, match="duplicate"):
            assess([make_match("evt-1", 0.5), make_match("evt-1", 0.6)])

    def test_score_out_of_range(self, make_match) -> None:
        with pytest.raises(InvalidArgumentError):
            assess([make_match("evt-1", 1.5)])
        with pytest.raises(InvalidArgumentError):
            assess([make_match("evt-1", -0.1)])

    def test_non_numeric_score(self) -> None:
        with pytest.raises(InvalidArgumentError):
            assess([CandidateMatch(event_id="evt-1", title="t", score="0.9")])  # type: ignore[arg-type]

    def test_blank_event_id(self, make_match) -> None:
        with pytest.raises(InvalidArgumentError):
            assess([make_match("  ", 0.5)])

    def test_not_a_sequence(self, make_match) -> None:
        with pytest.raises(InvalidArgumentError):
            assess(m for m in [make_match("evt-1", 0.5)])  # type: ignore[arg-type]

    def test_wrong_element_type(self) -> None:
        with pytest.raises(InvalidArgumentError):
            assess([{"event_id": "evt-1", "title": "t", "score": 0.5}])  # type: ignore[list-item]
