"""Title canonicalization applied before any comparison."""

from event_similarity.preprocessing.normalizer import normalize_title

__all__ = ["normalize_title"]
