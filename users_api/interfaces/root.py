"""
Root and health check router.

``GET /`` serves a fixed plain-text greeting; ``GET /health`` serves
liveness information for probes. Neither touches the database.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from users_api.core.config import Settings
from users_api.interfaces.users.dependencies import get_app_settings
from users_api.interfaces.users.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
async def root(settings: Settings = Depends(get_app_settings)) -> str:
    """Return the configured greeting."""
    return settings.greeting


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=settings.version)
