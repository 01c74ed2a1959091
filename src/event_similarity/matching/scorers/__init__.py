"""Title scorers -- pure functions operating on raw title strings."""

from event_similarity.matching.scorers.edit_distance import levenshtein_distance
from event_similarity.matching.scorers.title_scorer import title_similarity

__all__ = ["levenshtein_distance", "title_similarity"]
