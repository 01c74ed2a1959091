"""Scoring, classification and aggregation of duplicate candidates."""

from event_similarity.matching.assessment import assess, classify
from event_similarity.matching.config import (
    SimilarityConfig,
    ThresholdConfig,
    load_similarity_config,
)
from event_similarity.matching.models import (
    Assessment,
    Candidate,
    CandidateMatch,
    DuplicateCheckResult,
)
from event_similarity.matching.pipeline import check_duplicates, score_candidates

__all__ = [
    "assess",
    "Assessment",
    "Candidate",
    "CandidateMatch",
    "check_duplicates",
    "classify",
    "DuplicateCheckResult",
    "load_similarity_config",
    "score_candidates",
    "SimilarityConfig",
    "ThresholdConfig",
]
