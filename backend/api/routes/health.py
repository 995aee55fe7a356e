"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from ..dependencies import ServiceContainer, get_container

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    secret: str


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running. No authentication, no store access.
    """
    return HealthResponse(status="healthy", version=request.app.state.settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    container: ServiceContainer = Depends(get_container),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports whether the store answers and whether tokens are signed with a
    configured secret. Always returns 200; ``status`` is ``degraded`` when
    either check fails.
    """
    try:
        container.user_repository.ping()
        database = "connected"
    except Exception as e:
        logger.warning("Readiness check could not reach the store: %s", e)
        database = "unavailable"

    secret = "insecure-default" if container.tokens.insecure else "configured"
    ready = database == "connected" and secret == "configured"

    return ReadinessResponse(
        status="ready" if ready else "degraded",
        database=database,
        secret=secret,
    )
