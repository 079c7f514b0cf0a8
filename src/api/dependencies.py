"""
API Dependencies.

Shared dependencies for API routes (collaborator wiring).
"""

from typing import Annotated

from fastapi import Depends

from src.connections.google_maps import GoogleMapsClient, get_google_maps
from src.connections.postgres import get_postgres
from src.modules.properties import PropertyRepository
from src.modules.recommendations.service import RecommendationService


async def get_recommendation_service() -> RecommendationService:
    """
    Build a recommendation service backed by the catalog and geocoder.

    Returns:
        RecommendationService for the current request
    """
    postgres = await get_postgres()
    return RecommendationService(
        catalog=PropertyRepository(postgres.pool),
        geocoder=get_google_maps(),
    )


# Type aliases for dependency injection
RecommendationServiceDep = Annotated[
    RecommendationService, Depends(get_recommendation_service)
]
GoogleMapsDep = Annotated[GoogleMapsClient, Depends(get_google_maps)]
