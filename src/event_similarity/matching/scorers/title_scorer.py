"""Title similarity scorer.

Both titles are normalized first so the score reflects substantive textual
difference only, then the Levenshtein distance is scaled by the longer
normalized title.
"""

from __future__ import annotations

from event_similarity.matching.scorers.edit_distance import levenshtein_distance
from event_similarity.preprocessing.normalizer import normalize_title


def title_similarity(title_a: str, title_b: str) -> float:
    """Compute the similarity between two raw event titles.

    Returns a float in [0, 1]:
    - 1.0 if both titles normalize to the same string (including both empty)
    - 0.0 if exactly one of them normalizes to the empty string
    - ``1 - distance / max(len_a, len_b)`` otherwise

    The score is symmetric in its arguments.
    """
    norm_a = normalize_title(title_a)
    norm_b = normalize_title(title_b)

    if norm_a == norm_b:
        return 1.0
    if not norm_a or not norm_b:
        return 0.0

    distance = levenshtein_distance(norm_a, norm_b)
    return 1.0 - distance / max(len(norm_a), len(norm_b))
