"""
Health Check Routes - liveness and readiness endpoints for the hosting platform.
"""
from datetime import datetime, timezone

from fastapi import APIRouter

from lucy_backend.core.config import get_settings
from lucy_backend.core.logging_config import get_logger
from lucy_backend.models.chat import HealthResponse

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
)
async def health_check() -> HealthResponse:
    """
    Report that the API is running and responsive.

    Does not call the model provider.
    """
    logger.debug("Health check requested")

    return HealthResponse(
        status="ok",
        service=get_settings().app_name,
        timestamp=datetime.now(timezone.utc)
    )


@router.get(
    "/ready",
    response_model=HealthResponse,
    summary="Readiness check endpoint",
)
async def readiness_check() -> HealthResponse:
    """Report readiness; configuration has already been validated at startup."""
    logger.debug("Readiness check requested")

    return HealthResponse(
        status="ready",
        service=get_settings().app_name,
        timestamp=datetime.now(timezone.utc)
    )
