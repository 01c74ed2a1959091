"""Read-only view of the active duplicate-check thresholds."""

from fastapi import APIRouter, Depends

from event_similarity.api.deps import get_similarity_config
from event_similarity.api.schemas import ThresholdsResponse
from event_similarity.matching.config import SimilarityConfig

router = APIRouter(prefix="/api/config", tags=["config"])


@router.get("/thresholds", response_model=ThresholdsResponse)
async def get_thresholds(
    config: SimilarityConfig = Depends(get_similarity_config),
) -> ThresholdsResponse:
    return ThresholdsResponse(
        block=config.thresholds.block,
        warn=config.thresholds.warn,
        strict=config.strict,
    )
