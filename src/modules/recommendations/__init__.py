"""Recommendations module."""

from src.modules.recommendations.criteria import (
    Coordinates,
    MustHave,
    Preferences,
)
from src.modules.recommendations.models import (
    Explanation,
    Pagination,
    RecommendationItem,
    RecommendationRequest,
    RecommendationResponse,
    ScoreResult,
)

__all__ = [
    # Criteria
    "Coordinates",
    "MustHave",
    "Preferences",
    # Results
    "Explanation",
    "ScoreResult",
    "RecommendationItem",
    "Pagination",
    "RecommendationRequest",
    "RecommendationResponse",
]
