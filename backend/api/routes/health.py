"""Health check endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel

from backend.api.deps import Settings

router = APIRouter()


class HealthCheckResponse(BaseModel):
    """Basic health check response."""

    status: str
    service: str
    environment: str
    genius_configured: bool
    match_strategy: str


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(settings: Settings) -> HealthCheckResponse:
    """Health check endpoint for load balancers and monitoring."""
    return HealthCheckResponse(
        status="healthy" if settings.has_genius_token else "degraded",
        service="lyrics-link",
        environment=settings.environment,
        genius_configured=settings.has_genius_token,
        match_strategy=settings.match_strategy,
    )
