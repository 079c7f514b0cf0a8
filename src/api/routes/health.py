"""Health check routes."""

from fastapi import APIRouter

from config.settings import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health() -> dict:
    """Health check endpoint. Reports whether geocoding is configured."""
    return {"status": True, "geocoding": get_settings().google_maps.enabled}
