"""Value types exchanged by the duplicate-check engine.

Everything here is immutable and lives only for one duplicate-check
request.  Persisting anything derived from these objects is the caller's
job (see ``event_similarity.alerts.check_log``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Assessment(str, Enum):
    """Severity label for a candidate or for a whole duplicate check."""

    CLEAR = "clear"
    LOW_RISK = "low_risk"
    WARN = "warn"
    BLOCK = "block"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {
    Assessment.CLEAR: 0,
    Assessment.LOW_RISK: 1,
    Assessment.WARN: 2,
    Assessment.BLOCK: 3,
}


@dataclass(frozen=True)
class Candidate:
    """An existing event the data layer considers a possible duplicate.

    The data layer has already filtered on organizer, location and date
    window; only the title is compared here.
    """

    event_id: str
    title: str

    @classmethod
    def from_dict(cls, data: dict) -> Candidate:
        return cls(event_id=data["event_id"], title=data["title"])


@dataclass(frozen=True)
class CandidateMatch:
    """One scored comparison between the submitted title and a candidate.

    Attributes:
        event_id: Identifier of the existing event.
        title: The existing event's raw title.
        score: Title similarity in [0, 1].
        assessment: Label assigned by the assessment policy, or ``None``
            before classification.
    """

    event_id: str
    title: str
    score: float
    assessment: Assessment | None = None

    def to_dict(self) -> dict:
        return {
            "event_id": self.event_id,
            "title": self.title,
            "score": self.score,
            "assessment": self.assessment.value if self.assessment else None,
        }


def match_sort_key(match: CandidateMatch) -> tuple[float, str]:
    """Order by score descending, then event id ascending."""
    return (-match.score, match.event_id)


@dataclass(frozen=True)
class DuplicateCheckResult:
    """Aggregate outcome of a duplicate check.

    Attributes:
        has_duplicates: Whether the caller should treat the submission as a
            duplicate and refuse it.
        assessment: Highest severity across all candidates.
        matches: Candidates surfaced to the user, ordered by
            :func:`match_sort_key`.
    """

    has_duplicates: bool
    assessment: Assessment
    matches: tuple[CandidateMatch, ...] = ()

    @property
    def top_match(self) -> CandidateMatch | None:
        return self.matches[0] if self.matches else None

    @property
    def top_score(self) -> float | None:
        return self.matches[0].score if self.matches else None

    def to_dict(self) -> dict:
        return {
            "has_duplicates": self.has_duplicates,
            "assessment": self.assessment.value,
            "matches": [m.to_dict() for m in self.matches],
        }
