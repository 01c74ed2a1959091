"""Duplicate-check endpoint used by the event-creation flow.

The endpoint itself always answers 200; ``status_code`` in the body tells
the event-creation handler what to answer its own client with.
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends

from event_similarity.alerts.formatter import format_alert, warning_message
from event_similarity.api.deps import get_similarity_config
from event_similarity.api.schemas import (
    DuplicateCheckRequest,
    DuplicateCheckResponse,
    result_to_response,
)
from event_similarity.matching.config import SimilarityConfig
from event_similarity.matching.models import Assessment, DuplicateCheckResult
from event_similarity.matching.pipeline import check_duplicates

logger = structlog.get_logger()

router = APIRouter(prefix="/api/duplicate-check", tags=["duplicates"])


def creation_decision(result: DuplicateCheckResult) -> tuple[str, int, str | None]:
    """Map a result to ``(decision, status_code, error_code)`` for event creation.

    Duplicates are rejected with 409, WARN results are created with a
    warning, anything else is created cleanly.
    """
    if result.has_duplicates:
        return "reject", 409, "duplicate_detected"
    if result.assessment is Assessment.WARN:
        return "warn", 201, None
    return "allow", 201, None


@router.post("", response_model=DuplicateCheckResponse)
async def duplicate_check(
    body: DuplicateCheckRequest,
    config: SimilarityConfig = Depends(get_similarity_config),
) -> DuplicateCheckResponse:
    """Score the submitted title against the candidate events."""
    result = check_duplicates(
        body.title,
        [c.to_candidate() for c in body.candidates],
        strict=body.strict,
        config=config,
    )
    decision, status_code, code = creation_decision(result)

    logger.info(
        "duplicate_check",
        candidates=len(body.candidates),
        assessment=result.assessment.value,
        has_duplicates=result.has_duplicates,
        decision=decision,
        top_event_id=result.top_match.event_id if result.top_match else None,
    )

    return result_to_response(
        result,
        alert=format_alert(result.matches),
        warning=warning_message(result),
        decision=decision,
        status_code=status_code,
        code=code,
    )
