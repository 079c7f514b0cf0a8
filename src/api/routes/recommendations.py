"""Property recommendation routes."""

from fastapi import APIRouter, HTTPException, Request
from loguru import logger

from src.api.dependencies import RecommendationServiceDep
from src.modules.recommendations import RecommendationRequest, RecommendationResponse
from src.modules.recommendations.service import (
    InvalidConstraintsError,
    RecommendationService,
)

recommend_log = logger.bind(module="Recommend")

router = APIRouter(prefix="/recommendations", tags=["Recommendations"])

# Query parameter -> (section, field)
QUERY_FIELDS = {
    "location": ("must_have", "location"),
    "categoryId": ("must_have", "category_id"),
    "minPrice": ("must_have", "min_price"),
    "maxPrice": ("must_have", "max_price"),
    "minRoi": ("must_have", "min_roi"),
    "minArea": ("must_have", "min_area"),
    "maxDistanceFromHighway": ("must_have", "max_distance_from_highway"),
    "status": ("must_have", "status"),
    "preferredLocation": ("preferences", "location"),
    "preferredLatitude": ("preferences", "latitude"),
    "preferredLongitude": ("preferences", "longitude"),
    "locationRadiusKm": ("preferences", "location_radius_km"),
    "budget": ("preferences", "budget"),
    "preferredRoi": ("preferences", "roi_percent"),
    "preferredArea": ("preferences", "area_sqft"),
    "preferredMaxDistance": ("preferences", "max_distance_from_highway"),
}


def build_request_from_query(params: dict[str, list[str]]) -> RecommendationRequest:
    """
    Build a recommendation request from query parameters.

    Args:
        params: Query parameters, each mapped to all of its values

    Returns:
        RecommendationRequest (repeated parameters use the first value)
    """
    sections: dict[str, dict] = {"must_have": {}, "preferences": {}}
    for param, (section, field) in QUERY_FIELDS.items():
        values = params.get(param)
        if values:
            sections[section][field] = values[0]

    return RecommendationRequest(
        must_have=sections["must_have"],
        preferences=sections["preferences"],
        page=(params.get("page") or [None])[0],
        limit=(params.get("limit") or [None])[0],
    )


async def run_recommendation(
    service: RecommendationService, data: RecommendationRequest
) -> RecommendationResponse:
    """Run the pipeline and map failures to HTTP errors."""
    try:
        return await service.recommend(data)
    except InvalidConstraintsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        recommend_log.error(f"Failed to build recommendations: {e}")
        raise HTTPException(status_code=500, detail="Failed to build recommendations")


@router.get("", response_model=RecommendationResponse)
async def get_recommendations(
    request: Request,
    service: RecommendationServiceDep,
) -> RecommendationResponse:
    """
    Recommend properties from query parameters.

    Must-have: location, categoryId, minPrice, maxPrice, minRoi, minArea,
    maxDistanceFromHighway, status.
    Preferences: preferredLocation, preferredLatitude, preferredLongitude,
    locationRadiusKm, budget, preferredRoi, preferredArea, preferredMaxDistance.
    """
    params = {key: request.query_params.getlist(key) for key in request.query_params.keys()}
    data = build_request_from_query(params)
    return await run_recommendation(service, data)


@router.post("", response_model=RecommendationResponse)
async def post_recommendations(
    data: RecommendationRequest,
    service: RecommendationServiceDep,
) -> RecommendationResponse:
    """
    Recommend properties from a JSON body.

    Body: {"mustHave": {...}, "preferences": {...}, "page": 1, "limit": 20}
    """
    return await run_recommendation(service, data)
