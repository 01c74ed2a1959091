"""Pydantic request/response schemas for the duplicate-check API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from event_similarity.alerts.formatter import Alert
from event_similarity.matching.models import Candidate, DuplicateCheckResult


class CandidateSchema(BaseModel):
    event_id: str = Field(min_length=1)
    title: str

    def to_candidate(self) -> Candidate:
        return Candidate(event_id=self.event_id, title=self.title)


class DuplicateCheckRequest(BaseModel):
    title: str
    candidates: list[CandidateSchema] = []
    strict: bool | None = None


class CandidateMatchSchema(BaseModel):
    event_id: str
    title: str
    score: float
    assessment: str | None = None


class AlertSchema(BaseModel):
    type: Literal["info", "warning", "error"]
    title: str
    message: str
    suggestions: list[str] = []


class DuplicateCheckResponse(BaseModel):
    has_duplicates: bool
    assessment: Literal["clear", "low_risk", "warn", "block"]
    matches: list[CandidateMatchSchema] = []
    alert: AlertSchema
    warning: str | None = None
    decision: Literal["reject", "warn", "allow"]
    status_code: int
    code: str | None = None


class ThresholdsResponse(BaseModel):
    block: float
    warn: float
    strict: bool


def result_to_response(
    result: DuplicateCheckResult,
    alert: Alert,
    warning: str | None,
    decision: str,
    status_code: int,
    code: str | None = None,
) -> DuplicateCheckResponse:
    """Flatten engine objects into the response schema."""
    return DuplicateCheckResponse(
        **result.to_dict(),
        alert=AlertSchema(**alert.to_dict()),
        warning=warning,
        decision=decision,
        status_code=status_code,
        code=code,
    )
