"""Duplicate-check orchestrator.

Scores the submitted title against every candidate handed over by the
data layer and runs the assessment policy.  All functions are PURE -- no
database access.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from event_similarity.errors import InvalidArgumentError
from event_similarity.matching.assessment import assess, classify
from event_similarity.matching.config import SimilarityConfig, ThresholdConfig
from event_similarity.matching.models import (
    Candidate,
    CandidateMatch,
    DuplicateCheckResult,
)
from event_similarity.matching.scorers import title_similarity

logger = structlog.get_logger()


def score_candidates(
    title: str,
    candidates: Sequence[Candidate],
    thresholds: ThresholdConfig | None = None,
) -> list[CandidateMatch]:
    """Score and label every candidate, preserving input order.

    Unlike :func:`check_duplicates` nothing is filtered, so callers can
    inspect the score of every candidate.
    """
    if not isinstance(title, str):
        raise InvalidArgumentError(
            f"title must be a string, got {type(title).__name__}"
        )
    if isinstance(candidates, (str, bytes)) or not isinstance(candidates, Sequence):
        raise InvalidArgumentError(
            f"candidates must be a sequence, got {type(candidates).__name__}"
        )

    matches: list[CandidateMatch] = []
    for candidate in candidates:
        if not isinstance(candidate, Candidate):
            raise InvalidArgumentError(
                f"expected Candidate, got {type(candidate).__name__}"
            )
        score = title_similarity(title, candidate.title)
        matches.append(
            CandidateMatch(
                event_id=candidate.event_id,
                title=candidate.title,
                score=score,
                assessment=classify(score, thresholds),
            )
        )
    return matches


def check_duplicates(
    title: str,
    candidates: Sequence[Candidate],
    strict: bool | None = None,
    config: SimilarityConfig | None = None,
) -> DuplicateCheckResult:
    """Run a full duplicate check for a newly submitted event title.

    1. Scores the title against each candidate's title.
    2. Labels each pairing against the configured thresholds.
    3. Aggregates the labels into one decision.

    Args:
        title: Title of the event being created.
        candidates: Nearby existing events from the data layer, with
            unique ``event_id`` values.
        strict: Treat WARN-level matches as duplicates.  ``None`` uses
            ``config.strict``.
        config: Duplicate-check configuration; defaults when omitted.

    Returns:
        A ``DuplicateCheckResult`` with matches ordered by score.

    Raises:
        InvalidArgumentError: On malformed input or duplicate candidate ids.
    """
    if config is None:
        config = SimilarityConfig()
    if strict is None:
        strict = config.strict

    scored = score_candidates(title, candidates, config.thresholds)
    result = assess(scored, strict=strict, thresholds=config.thresholds)

    logger.debug(
        "duplicate_check_completed",
        candidate_count=len(scored),
        assessment=result.assessment.value,
        has_duplicates=result.has_duplicates,
        top_score=result.top_score,
    )
    return result
