"""
Recommendation Criteria.

Must-have constraints and soft preferences supplied by the buyer.
Numeric fields accept strings like "1,200.50"; unparseable input is
treated as missing.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.utils.parsers.number import parse_int, parse_number, parse_text

NUMERIC_MUST_HAVE = (
    "min_price",
    "max_price",
    "min_roi",
    "min_area",
    "max_distance_from_highway",
)

NUMERIC_PREFERENCES = (
    "latitude",
    "longitude",
    "location_radius_km",
    "budget",
    "roi_percent",
    "area_sqft",
    "max_distance_from_highway",
)


class Coordinates(BaseModel):
    """A latitude/longitude pair."""

    latitude: float
    longitude: float


class MustHave(BaseModel):
    """
    Hard constraints. A listing violating any active one is excluded.

    All fields are optional; None imposes no constraint.
    """

    model_config = ConfigDict(populate_by_name=True)

    location: Optional[str] = Field(None, description="Substring of listing location")
    category_id: Optional[int] = Field(None, alias="categoryId")
    status: Optional[str] = Field(None, description="e.g. available, sold")
    min_price: Optional[float] = Field(None, alias="minPrice")
    max_price: Optional[float] = Field(None, alias="maxPrice")
    min_roi: Optional[float] = Field(None, alias="minRoi")
    min_area: Optional[float] = Field(None, alias="minArea")
    max_distance_from_highway: Optional[float] = Field(
        None, alias="maxDistanceFromHighway"
    )

    @field_validator("location", "status", mode="before")
    @classmethod
    def clean_text(cls, v: Any) -> Optional[str]:
        """Trim text; blank means no constraint."""
        return parse_text(v)

    @field_validator("category_id", mode="before")
    @classmethod
    def clean_category(cls, v: Any) -> Optional[int]:
        """Parse category id, malformed input means no constraint."""
        return parse_int(v)

    @field_validator(*NUMERIC_MUST_HAVE, mode="before")
    @classmethod
    def clean_number(cls, v: Any) -> Optional[float]:
        """Parse numbers like "1,200.50"; malformed input is treated as missing."""
        return parse_number(v)

    def has_valid_price_range(self) -> bool:
        """Check min_price <= max_price when both are set."""
        if self.min_price is None or self.max_price is None:
            return True
        return self.min_price <= self.max_price


class Preferences(BaseModel):
    """
    Soft criteria used for scoring.

    Coordinates take precedence over location text when both are given.
    """

    model_config = ConfigDict(populate_by_name=True)

    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    location_radius_km: Optional[float] = Field(None, alias="locationRadiusKm")
    budget: Optional[float] = None
    roi_percent: Optional[float] = Field(None, alias="roiPercent")
    area_sqft: Optional[float] = Field(None, alias="areaSqft")
    max_distance_from_highway: Optional[float] = Field(
        None, alias="maxDistanceFromHighway"
    )

    @field_validator("location", mode="before")
    @classmethod
    def clean_text(cls, v: Any) -> Optional[str]:
        """Trim text; blank means no preference."""
        return parse_text(v)

    @field_validator(*NUMERIC_PREFERENCES, mode="before")
    @classmethod
    def clean_number(cls, v: Any) -> Optional[float]:
        """Parse numbers like "1,200.50"; malformed input is treated as missing."""
        return parse_number(v)

    @property
    def has_coordinates(self) -> bool:
        """Whether both latitude and longitude are given."""
        return self.latitude is not None and self.longitude is not None
