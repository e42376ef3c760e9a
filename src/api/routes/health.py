"""Health API endpoints."""
from typing import Any

from fastapi import APIRouter

from src.core import get_health_monitor, get_settings
from src.models.presentation import HealthStatus

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """
    Report configuration and the outcome of the last upstream call.

    Never calls upstream, so it keeps answering when no key is configured.
    """
    settings = get_settings()
    snapshot = get_health_monitor().snapshot()

    status = HealthStatus(
        model=settings.megallm_model,
        api_format=settings.api_format.value,
        configured=settings.is_configured,
        healthy=snapshot.healthy,
        last_check=snapshot.last_check.isoformat() if snapshot.last_check else None,
        last_error=snapshot.last_error,
    )
    return status.model_dump(by_alias=True)
