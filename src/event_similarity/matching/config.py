"""Duplicate-check configuration with sensible defaults.

All parameters can be overridden via ``config/similarity.yaml``.
If the file does not exist, defaults are used.
"""

from __future__ import annotations

from pathlib import Path

import structlog
import yaml
from pydantic import BaseModel, Field, model_validator

logger = structlog.get_logger()


class ThresholdConfig(BaseModel):
    """Title-similarity thresholds for per-candidate assessments.

    A score at or above ``block`` is a BLOCK, at or above ``warn`` a WARN.
    Any positive score below ``warn`` is LOW_RISK.
    """

    block: float = Field(default=0.85, ge=0.0, le=1.0)
    warn: float = Field(default=0.65, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def check_ordering(self) -> "ThresholdConfig":
        """Reject configurations where WARN would shadow BLOCK."""
        if self.warn > self.block:
            raise ValueError(
                f"warn threshold ({self.warn}) must not exceed block threshold ({self.block})"
            )
        return self


class SimilarityConfig(BaseModel):
    """Top-level duplicate-check configuration."""

    thresholds: ThresholdConfig = ThresholdConfig()
    strict: bool = False


def load_similarity_config(path: Path) -> SimilarityConfig:
    """Load the duplicate-check configuration from a YAML file.

    If the file does not exist, returns a ``SimilarityConfig`` with all
    default values.  Partial overrides are supported -- only the keys
    present in the YAML file will override defaults.
    """
    if not path.exists():
        logger.debug("similarity_config_missing", path=str(path))
        return SimilarityConfig()

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    config = SimilarityConfig(**data)
    logger.debug(
        "similarity_config_loaded",
        path=str(path),
        block=config.thresholds.block,
        warn=config.thresholds.warn,
        strict=config.strict,
    )
    return config
