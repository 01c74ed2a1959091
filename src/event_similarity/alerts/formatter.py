"""Turn duplicate-check outcomes into messages for the event organizer."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from event_similarity.matching.models import (
    Assessment,
    CandidateMatch,
    DuplicateCheckResult,
    match_sort_key,
)

BLOCK_SUGGESTIONS = (
    "Choose a different event title",
    "Pick a different date or location",
    "Add more specific details to differentiate",
)

WARN_SUGGESTIONS = (
    "Review the similar events to avoid confusion",
    "Consider collaborating instead of creating duplicate",
    "You can proceed, but manually review recommended",
)


@dataclass(frozen=True)
class Alert:
    """Alert shown to the organizer.

    Attributes:
        type: ``"info"``, ``"warning"`` or ``"error"``.
        title: Short headline.
        message: One-sentence explanation.
        suggestions: Actionable next steps (may be empty).
    """

    type: str
    title: str
    message: str
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "title": self.title,
            "message": self.message,
            "suggestions": list(self.suggestions),
        }


def format_alert(matches: Sequence[CandidateMatch]) -> Alert:
    """Build the organizer-facing alert for a list of matches.

    The highest-scoring match (ties by event id) is named in BLOCK alerts.
    """
    if not matches:
        return Alert(
            type="info",
            title="No similar events found",
            message="Your event appears to be unique.",
        )

    labels = {m.assessment for m in matches}

    if Assessment.BLOCK in labels:
        top = min(matches, key=match_sort_key)
        return Alert(
            type="error",
            title="Duplicate Event Detected",
            message=f'Your event is too similar to "{top.title}"',
            suggestions=list(BLOCK_SUGGESTIONS),
        )

    if Assessment.WARN in labels:
        return Alert(
            type="warning",
            title="Similar Events Found",
            message=f"Found {len(matches)} event(s) with similar titles/details",
            suggestions=list(WARN_SUGGESTIONS),
        )

    return Alert(
        type="info",
        title="Low Risk",
        message="Your event appears to be sufficiently unique.",
    )


def _percent(score: float) -> str:
    # halves round up, 0.625 -> 63%
    return f"{math.floor(score * 100 + 0.5)}%"


def warning_message(result: DuplicateCheckResult) -> str | None:
    """Return a one-line message for BLOCK/WARN results, ``None`` otherwise."""
    top = result.top_match

    if result.assessment is Assessment.BLOCK:
        if top is None:
            return "Event blocked: Potential duplicate detected"
        return f'Event blocked: Too similar to "{top.title}" ({_percent(top.score)} match)'

    if result.assessment is Assessment.WARN:
        if top is None:
            return "Warning: Potential duplicate event detected. Please review."
        return (
            f'Warning: Event similar to "{top.title}" '
            f"({_percent(top.score)} match). Please review."
        )

    return None
