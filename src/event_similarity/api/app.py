"""FastAPI application for the event similarity service."""

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from event_similarity import __version__
from event_similarity.api.routes.config import router as config_router
from event_similarity.api.routes.duplicates import router as duplicates_router
from event_similarity.api.routes.health import router as health_router
from event_similarity.config.settings import get_settings
from event_similarity.errors import InvalidArgumentError

logger = structlog.get_logger()

app = FastAPI(title="Event Similarity API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(
    request: Request, exc: InvalidArgumentError
) -> JSONResponse:
    logger.warning("invalid_argument", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "code": "invalid_argument"},
    )


app.include_router(health_router)
app.include_router(duplicates_router)
app.include_router(config_router)
