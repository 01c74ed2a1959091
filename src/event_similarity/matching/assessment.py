"""Assessment policy.

Labels each scored candidate against the configured thresholds and folds
the labels into a single request-level decision.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

import structlog

from event_similarity.errors import InvalidArgumentError
from event_similarity.matching.config import ThresholdConfig
from event_similarity.matching.models import (
    Assessment,
    CandidateMatch,
    DuplicateCheckResult,
    match_sort_key,
)

logger = structlog.get_logger()


def classify(score: float, thresholds: ThresholdConfig | None = None) -> Assessment:
    """Apply threshold-based labelling to a single similarity score.

    Returns:
        ``BLOCK`` if score >= block threshold,
        ``WARN`` if score >= warn threshold,
        ``LOW_RISK`` for any other positive score,
        ``CLEAR`` otherwise.
    """
    if thresholds is None:
        thresholds = ThresholdConfig()

    if score >= thresholds.block:
        return Assessment.BLOCK
    if score >= thresholds.warn:
        return Assessment.WARN
    if score > 0:
        return Assessment.LOW_RISK
    return Assessment.CLEAR


def _validate(candidates: Sequence[CandidateMatch]) -> None:
    if isinstance(candidates, (str, bytes)) or not isinstance(candidates, Sequence):
        raise InvalidArgumentError(
            f"candidates must be a sequence, got {type(candidates).__name__}"
        )

    seen: set[str] = set()
    for candidate in candidates:
        if not isinstance(candidate, CandidateMatch):
            raise InvalidArgumentError(
                f"expected CandidateMatch, got {type(candidate).__name__}"
            )
        if not isinstance(candidate.event_id, str) or not candidate.event_id.strip():
            raise InvalidArgumentError("candidate event_id must be a non-empty string")
        if not isinstance(candidate.title, str):
            raise InvalidArgumentError(
                f"candidate {candidate.event_id!r} has a non-string title"
            )
        if (
            isinstance(candidate.score, bool)
            or not isinstance(candidate.score, (int, float))
            or not 0.0 <= candidate.score <= 1.0
        ):
            raise InvalidArgumentError(
                f"candidate {candidate.event_id!r} has score {candidate.score} outside [0, 1]"
            )
        if candidate.event_id in seen:
            raise InvalidArgumentError(
                f"duplicate candidate event_id {candidate.event_id!r}"
            )
        seen.add(candidate.event_id)


def assess(
    candidates: Sequence[CandidateMatch],
    strict: bool = False,
    thresholds: ThresholdConfig | None = None,
) -> DuplicateCheckResult:
    """Fold scored candidates into one duplicate-check result.  PURE FUNCTION.

    Every candidate is (re)labelled from its score with :func:`classify`,
    so the outcome depends only on scores and thresholds.  Aggregation:

    - any BLOCK: ``BLOCK``, duplicates found, only BLOCK candidates listed
    - any WARN, strict: ``WARN``, duplicates found, only WARN candidates listed
    - any WARN, lenient: ``WARN``, no duplicates, all candidates listed
    - any LOW_RISK: ``LOW_RISK``, no duplicates, all candidates listed
    - otherwise: ``CLEAR`` with no matches

    Listed matches are ordered by score descending, ties by event id.

    Args:
        candidates: Scored candidates with unique ``event_id`` values.
        strict: Treat WARN-level matches as duplicates.
        thresholds: Classification thresholds; defaults when omitted.

    Raises:
        InvalidArgumentError: On malformed candidates or duplicate ids.
    """
    _validate(candidates)

    labelled = sorted(
        (replace(c, assessment=classify(c.score, thresholds)) for c in candidates),
        key=match_sort_key,
    )

    overall = max(
        (m.assessment for m in labelled),
        key=lambda a: a.severity,
        default=Assessment.CLEAR,
    )

    if overall is Assessment.BLOCK:
        has_duplicates = True
        matches = [m for m in labelled if m.assessment is Assessment.BLOCK]
    elif overall is Assessment.WARN and strict:
        has_duplicates = True
        matches = [m for m in labelled if m.assessment is Assessment.WARN]
    elif overall in (Assessment.WARN, Assessment.LOW_RISK):
        has_duplicates = False
        matches = labelled
    else:
        has_duplicates = False
        matches = []

    logger.debug(
        "candidates_assessed",
        candidate_count=len(labelled),
        assessment=overall.value,
        has_duplicates=has_duplicates,
        strict=strict,
    )

    return DuplicateCheckResult(
        has_duplicates=has_duplicates,
        assessment=overall,
        matches=tuple(matches),
    )
