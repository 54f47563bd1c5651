"""Liveness and readiness probes."""

from datetime import datetime

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from colloquy.config import Settings
from colloquy.domain.error import StoreUnavailableError
from colloquy.domain.repository import CommentRepository

VERSION = "0.1.0"

router = APIRouter(prefix="/health", tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Probe response."""

    status: str  # 'healthy' or 'ready'
    timestamp: datetime
    version: str
    environment: str
    git_sha: str


def _report(state: str, settings: Settings) -> HealthResponse:
    return HealthResponse(
        status=state,
        timestamp=datetime.now(),
        version=VERSION,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )


@router.get("", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Liveness: the process is up and serving requests."""
    return _report("healthy", settings)


@router.get("/ready", response_model=HealthResponse)
async def readiness_check(
    settings: FromDishka[Settings],
    comment_repository: FromDishka[CommentRepository],
) -> HealthResponse:
    """Readiness: the comment store answers.

    Raises:
        HTTPException: 503 while the store is unreachable
    """
    try:
        await comment_repository.ping()
    except StoreUnavailableError as e:
        logfire.warn("Readiness check failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Comment store unavailable",
            headers={"Retry-After": "5"},
        ) from e
    return _report("ready", settings)
