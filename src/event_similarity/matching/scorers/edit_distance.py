"""Levenshtein edit distance using RapidFuzz.

Unit-cost insertions, deletions and substitutions over code points, the
same metric as the textbook dynamic programming recurrence.
"""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein

from event_similarity.errors import InvalidArgumentError


def levenshtein_distance(a: str, b: str) -> int:
    """Return the minimum number of single-character edits turning *a* into *b*.

    Insertions, deletions and substitutions each cost 1.  The result is
    symmetric and equals ``len(b)`` when *a* is empty (and vice versa).
    """
    if not isinstance(a, str) or not isinstance(b, str):
        raise InvalidArgumentError("levenshtein_distance expects two strings")

    return Levenshtein.distance(a, b)
