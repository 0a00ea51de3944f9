"""Health check endpoints."""

from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from reportlab import Version as REPORTLAB_VERSION

from api.v1.dependencies import get_app_settings, get_card_renderer, get_profile_store
from core.config import Settings
from domain.repositories.profile_store import IProfileStore
from infrastructure.rendering.card_renderer import CardRenderer

VERSION = "1.0.0"

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    storage: str | None = None
    renderer: str | None = None


def _basic(config: Settings, status: str = "healthy", **extra: str) -> HealthResponse:
    return HealthResponse(
        status=status,
        version=VERSION,
        timestamp=datetime.utcnow().isoformat(),
        environment=config.app_env,
        **extra,
    )


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check(config: Settings = Depends(get_app_settings)) -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without checking dependencies. Fast and lightweight.
    """
    return _basic(config)


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    store: IProfileStore = Depends(get_profile_store),
    renderer: CardRenderer = Depends(get_card_renderer),
    config: Settings = Depends(get_app_settings),
) -> HealthResponse:
    """
    Detailed health check: pings the profile store and reports the card
    renderer configuration.

    A store that cannot be reached marks the service ``degraded``.
    """
    try:
        await store.ping()
        storage_status = f"{store.name}: healthy"
        overall_status = "healthy"
    except Exception as e:
        storage_status = f"{store.name}: unhealthy: {e}"
        overall_status = "degraded"

    return _basic(
        config,
        overall_status,
        storage=storage_status,
        renderer=f"reportlab {REPORTLAB_VERSION}: overflow={renderer.overflow_policy.value}",
    )
