"""FastAPI application."""

from fastapi import FastAPI

from backend.app.api.routes.allowance import router as allowance_router
from backend.app.api.routes.health import router as health_router
from backend.app.api.routes.metrics import router as metrics_router
from backend.app.config import get_settings

settings = get_settings()

app = FastAPI(title=settings.api_title, version=settings.api_version)

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(allowance_router, tags=["allowance"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": settings.api_title, "version": settings.api_version}
