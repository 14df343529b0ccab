"""Health check routes for the SEMF API."""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from semf.core.config import get_settings

router = APIRouter()


class HealthStatus(BaseModel):
    """Health check status response."""
    status: str
    timestamp: datetime
    version: str
    environment: str


@router.get("/health", response_model=HealthStatus)
async def health_check() -> HealthStatus:
    """Basic health check endpoint.

    Returns:
        HealthStatus: Application health status
    """
    settings = get_settings()
    return HealthStatus(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )
