"""Health check endpoints."""

from datetime import datetime, timezone

import redis.asyncio as redis
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.dependencies import get_redis
from core.config import APP_VERSION, settings
from core.exceptions import StoreError
from infrastructure.store.redis_client import check_connection

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    store: str | None = None


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without touching the store.
    """
    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        timestamp=_now(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    client: redis.Redis = Depends(get_redis),
) -> HealthResponse:
    """Health check that also pings the store."""
    try:
        await check_connection(client)
        store_status = "healthy"
    except StoreError as e:
        store_status = f"unhealthy: {e.message}"

    return HealthResponse(
        status="healthy" if store_status == "healthy" else "degraded",
        version=APP_VERSION,
        timestamp=_now(),
        environment=settings.app_env,
        store=store_status,
    )
