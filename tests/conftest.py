"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from event_similarity.api.app import app
from event_similarity.api.deps import get_similarity_config
from event_similarity.matching.config import SimilarityConfig, ThresholdConfig
from event_similarity.matching.models import Candidate, CandidateMatch


@pytest.fixture
def nearby_candidates() -> list[Candidate]:
    """Candidates as the data layer would hand them over for one organizer."""
    return [
        Candidate(event_id="evt-003", title="Code Craft Hackathon 2025"),
        Candidate(event_id="evt-001", title="AI Workshop"),
        Candidate(event_id="evt-002", title="Gala Dinner"),
    ]


@pytest.fixture
def make_match():
    """Factory for unlabelled ``CandidateMatch`` objects."""

    def _make(event_id: str, score: float, title: str | None = None) -> CandidateMatch:
        return CandidateMatch(event_id=event_id, title=title or f"Event {event_id}", score=score)

    return _make


@pytest.fixture
def similarity_config() -> SimilarityConfig:
    return SimilarityConfig(thresholds=ThresholdConfig(block=0.85, warn=0.65))


@pytest.fixture
async def api_client(similarity_config):
    """Async HTTP client hitting the FastAPI app with a fixed config."""
    app.dependency_overrides[get_similarity_config] = lambda: similarity_config
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
