"""
Recommendation Service.

Runs the recommendation pipeline for one request:
validate -> geocode -> fetch candidates -> hard filter -> score -> sort -> paginate.
"""

import math
from typing import Optional

from loguru import logger

from config.settings import get_settings
from src.matching.hard_filter import apply_hard_filters
from src.matching.scorer import score_property
from src.modules.recommendations.base import Geocoder, ListingCatalog
from src.modules.recommendations.criteria import MustHave, Preferences
from src.modules.recommendations.models import (
    Pagination,
    RecommendationItem,
    RecommendationRequest,
    RecommendationResponse,
)

recommend_log = logger.bind(module="Recommend")


class InvalidConstraintsError(ValueError):
    """Raised when must-have constraints contradict each other."""


def validate_must_have(must_have: MustHave) -> None:
    """
    Validate must-have constraints before any lookup.

    Raises:
        InvalidConstraintsError: If min_price > max_price
    """
    if not must_have.has_valid_price_range():
        raise InvalidConstraintsError(
            "Invalid constraints: minPrice cannot be greater than maxPrice"
        )


def clamp_paging(
    page: Optional[int],
    limit: Optional[int],
    default_limit: int = 20,
    max_limit: int = 50,
) -> tuple[int, int]:
    """
    Clamp paging parameters.

    Missing or zero values fall back to defaults.

    Examples:
        >>> clamp_paging(None, None)
        (1, 20)
        >>> clamp_paging(-3, 500)
        (1, 50)
        >>> clamp_paging(2, 0)
        (2, 20)
    """
    page = max(1, page or 1)
    limit = min(max_limit, max(1, limit or default_limit))
    return page, limit


def rank_items(items: list[RecommendationItem]) -> list[RecommendationItem]:
    """
    Sort by score desc, then match percentage desc.

    The sort is stable, so exact ties keep catalog order.
    """
    return sorted(items, key=lambda item: (-item.score, -item.match_percentage))


def paginate(
    items: list[RecommendationItem], page: int, limit: int
) -> RecommendationResponse:
    """
    Slice one page from the ranked list.

    Args:
        items: Ranked items
        page: 1-based page number
        limit: Page size

    Returns:
        RecommendationResponse with data and pagination metadata
    """
    total = len(items)
    total_pages = max(1, math.ceil(total / limit))
    offset = (page - 1) * limit

    return RecommendationResponse(
        data=items[offset : offset + limit],
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        ),
    )


class RecommendationService:
    """Rank catalog listings against a buyer's constraints and preferences."""

    def __init__(self, catalog: ListingCatalog, geocoder: Optional[Geocoder] = None):
        """
        Initialize service.

        Args:
            catalog: Listing source (e.g. PropertyRepository)
            geocoder: Optional address lookup; without it text scoring is used
        """
        self.catalog = catalog
        self.geocoder = geocoder
        self.settings = get_settings().recommendation

    async def resolve_coordinates(self, preferences: Preferences) -> Preferences:
        """
        Fill in preferred coordinates from the location text.

        Best effort: a failed lookup leaves the preferences unchanged so
        text-based location scoring still applies.

        Args:
            preferences: Buyer preferences

        Returns:
            Preferences with latitude/longitude set when resolved
        """
        if not preferences.location or preferences.has_coordinates:
            return preferences
        if self.geocoder is None:
            return preferences

        try:
            coordinates = await self.geocoder.geocode(preferences.location)
        except Exception as e:
            recommend_log.warning(f"Geocoding '{preferences.location}' failed: {e}")
            return preferences

        if coordinates is None:
            recommend_log.debug(
                f"No coordinates for '{preferences.location}', using text matching"
            )
            return preferences

        return preferences.model_copy(
            update={
                "latitude": coordinates.latitude,
                "longitude": coordinates.longitude,
            }
        )

    async def recommend(self, request: RecommendationRequest) -> RecommendationResponse:
        """
        Build one page of ranked recommendations.

        Args:
            request: Constraints, preferences and paging

        Returns:
            RecommendationResponse

        Raises:
            InvalidConstraintsError: If min_price > max_price
        """
        must_have = request.must_have
        validate_must_have(must_have)

        preferences = await self.resolve_coordinates(request.preferences)
        page, limit = clamp_paging(
            request.page,
            request.limit,
            default_limit=self.settings.default_limit,
            max_limit=self.settings.max_limit,
        )

        candidates = await self.catalog.find(must_have)
        filtered = apply_hard_filters(candidates, must_have)

        items = []
        for prop in filtered:
            result = score_property(prop, preferences)
            items.append(
                RecommendationItem(
                    property=prop,
                    score=result.score,
                    match_percentage=result.match_percentage,
                    explanation=result.explanation,
                )
            )

        ranked = rank_items(items)
        recommend_log.info(
            f"Ranked {len(ranked)} of {len(candidates)} candidates (page {page}, limit {limit})"
        )
        return paginate(ranked, page, limit)
