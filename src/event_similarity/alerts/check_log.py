"""Similarity-check audit records.

The engine never writes these anywhere.  The event-creation flow persists
them once the new event has an id.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from event_similarity.errors import InvalidArgumentError
from event_similarity.matching.models import Assessment, DuplicateCheckResult

_ACTIONS = {
    Assessment.BLOCK: "block",
    Assessment.WARN: "warn",
}


@dataclass(frozen=True)
class SimilarityCheckLog:
    """One row of the similarity-check log.

    Attributes:
        checking_event_id: Event that was being created or edited.
        similar_event_id: Existing event it was compared against.
        title_similarity_score: Score in [0, 1].
        action: ``"block"``, ``"warn"`` or ``"allowed"``.
        reason: Free-text reason, by default the match's assessment label.
    """

    checking_event_id: str
    similar_event_id: str
    title_similarity_score: float
    action: str
    reason: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


def check_action(result: DuplicateCheckResult) -> str:
    """Map a result's overall assessment to the logged action."""
    return _ACTIONS.get(result.assessment, "allowed")


def build_check_log(
    checking_event_id: str,
    result: DuplicateCheckResult,
    reason: str = "",
) -> list[SimilarityCheckLog]:
    """Build one log record per surfaced match, in result order."""
    if not isinstance(checking_event_id, str) or not checking_event_id.strip():
        raise InvalidArgumentError("checking_event_id must be a non-empty string")

    action = check_action(result)
    return [
        SimilarityCheckLog(
            checking_event_id=checking_event_id,
            similar_event_id=match.event_id,
            title_similarity_score=match.score,
            action=action,
            reason=reason or (match.assessment.value if match.assessment else ""),
        )
        for match in result.matches
    ]
