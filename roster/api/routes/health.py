"""Health Probe - liveness endpoint for container orchestration.

Invariants:
    - GET /health/ always returns 200 if the process is up
    - No readiness probe: there is no database to wait for
"""

from fastapi import APIRouter, Depends, status

from roster.config import Settings, get_settings
from roster.infrastructure.user_store import UserStore, get_user_store

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(
    store: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": "1.0.0",
        "users": len(store),
    }
