"""FastAPI dependency injection for the duplicate-check configuration."""

from functools import lru_cache

from event_similarity.config.settings import get_settings
from event_similarity.matching.config import SimilarityConfig, load_similarity_config


@lru_cache
def _load_config() -> SimilarityConfig:
    return load_similarity_config(get_settings().similarity_config_path)


def get_similarity_config() -> SimilarityConfig:
    """Return the configuration used for request handling."""
    return _load_config()
