"""API routes module."""

from src.api.routes.health import router as health_router
from src.api.routes.locations import router as locations_router
from src.api.routes.recommendations import router as recommendations_router

__all__ = [
    "health_router",
    "locations_router",
    "recommendations_router",
]
