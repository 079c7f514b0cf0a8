"""
Recommendation Models.

Pydantic models for recommendation requests, scores and responses.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.modules.properties.models import Property
from src.modules.recommendations.criteria import MustHave, Preferences
from src.utils.parsers.number import parse_int


class RecommendationRequest(BaseModel):
    """Recommendation request body (POST) or parsed query string (GET)."""

    model_config = ConfigDict(populate_by_name=True)

    must_have: MustHave = Field(default_factory=MustHave, alias="mustHave")
    preferences: Preferences = Field(default_factory=Preferences)
    page: Optional[int] = None
    limit: Optional[int] = None

    @field_validator("must_have", "preferences", mode="before")
    @classmethod
    def default_section(cls, v: Any) -> Any:
        """Treat a null section as empty."""
        return {} if v is None else v

    @field_validator("page", "limit", mode="before")
    @classmethod
    def clean_paging(cls, v: Any) -> Optional[int]:
        """Parse paging numbers, malformed input falls back to defaults."""
        return parse_int(v)


class Explanation(BaseModel):
    """One scored criterion."""

    reason: str
    points: float


class ScoreResult(BaseModel):
    """Score of one listing against one preference set."""

    score: float = 0
    max_possible: int = 0
    match_percentage: int = 0
    explanation: list[Explanation] = Field(default_factory=list)


class RecommendationItem(BaseModel):
    """A ranked listing with its score breakdown."""

    model_config = ConfigDict(populate_by_name=True)

    property: Property
    score: float
    match_percentage: int = Field(alias="matchPercentage")
    explanation: list[Explanation]


class Pagination(BaseModel):
    """Pagination metadata for an in-memory page."""

    model_config = ConfigDict(populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int = Field(alias="totalPages")
    has_next: bool = Field(alias="hasNext")
    has_prev: bool = Field(alias="hasPrev")


class RecommendationResponse(BaseModel):
    """Recommendation result page."""

    data: list[RecommendationItem]
    pagination: Pagination
