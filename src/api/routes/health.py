"""Health check endpoints."""

from datetime import datetime

import structlog
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.v1.dependencies import get_entity_store, get_persistence_service
from core.config import settings
from domain.services.persistence_service import PersistenceService
from infrastructure.store.memory_store import InMemoryEntityStore

logger = structlog.get_logger()

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    persistence: str | None = None
    profiles: int | None = None
    teams: int | None = None


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without checking dependencies. Fast and lightweight.
    """
    return HealthResponse(
        status="healthy",
        version="1.0.0",
        timestamp=datetime.utcnow().isoformat(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    persistence: PersistenceService = Depends(get_persistence_service),
    store: InMemoryEntityStore = Depends(get_entity_store),
) -> HealthResponse:
    """
    Detailed health check including snapshot storage connectivity.

    The service keeps answering while storage is down; saves resume once it
    is reachable again, so a storage failure only degrades the status.
    """
    try:
        await persistence.ping()
        persistence_status = "healthy"
    except Exception as e:
        logger.warning("persistence_unhealthy", error=str(e))
        persistence_status = f"unhealthy: {str(e)}"

    overall_status = "healthy" if persistence_status == "healthy" else "degraded"

    return HealthResponse(
        status=overall_status,
        version="1.0.0",
        timestamp=datetime.utcnow().isoformat(),
        environment=settings.app_env,
        persistence=persistence_status,
        profiles=len(store.list_profiles()),
        teams=len(store.list_teams()),
    )
