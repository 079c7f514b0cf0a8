"""Modules package - Domain modules with repository pattern."""

from src.modules.properties import (
    Property,
    PropertyRepository,
)
from src.modules.recommendations import (
    MustHave,
    Preferences,
    RecommendationRequest,
    RecommendationResponse,
    ScoreResult,
)

__all__ = [
    # Properties
    "Property",
    "PropertyRepository",
    # Recommendations
    "MustHave",
    "Preferences",
    "ScoreResult",
    "RecommendationRequest",
    "RecommendationResponse",
]
