"""Health check endpoints.

The service is stateless (trips arrive with each request), so health has
no external components to probe; /healthz reports the active rule instead.
"""

from typing import Any

from fastapi import APIRouter

from backend.app.config import get_settings

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz")
async def healthz() -> dict[str, Any]:
    """Health check with the configured allowance rule."""
    settings = get_settings()
    return {
        "status": "ok",
        "rule": {
            "max_stay_days": settings.max_stay_days,
            "window_days": settings.window_days,
        },
        "search_horizon_days": settings.search_horizon_days,
    }
