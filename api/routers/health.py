"""Health check endpoints."""

from datetime import datetime, timezone
from typing import Dict, Any

from fastapi import APIRouter, Depends

from api.config import get_settings, Settings
from freezebatch.recipes import REFERENCE_BATCHES, SINGLE_SERVE_RECIPES

router = APIRouter()


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """
    Basic liveness check.

    Returns 200 if the service is running.
    """
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/health/info")
async def service_info(
    settings: Settings = Depends(get_settings)
) -> Dict[str, Any]:
    """Return service information."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": "development" if settings.debug else "production",
        "reference_recipes": len(REFERENCE_BATCHES),
        "preset_recipes": len(SINGLE_SERVE_RECIPES),
    }
