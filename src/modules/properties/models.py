"""
Property Models.

Pydantic model for real-estate listing data read from the catalog.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Property(BaseModel):
    """Real-estate listing as stored in the properties table."""

    model_config = ConfigDict(populate_by_name=True)

    # Primary key
    id: int | None = None

    # Basic info
    title: str
    location: str = ""
    category_id: int = Field(alias="categoryId")
    category_name: str | None = Field(default=None, alias="categoryName")
    status: str = ""

    # Coordinates (both required for geo scoring)
    latitude: float | None = None
    longitude: float | None = None

    # Scoring fields, None = not recorded (never treated as 0)
    price_npr: int | None = Field(default=None, alias="priceNpr")
    roi_percent: float | None = Field(default=None, alias="roiPercent")
    area_sqft: float | None = Field(default=None, alias="areaSqft")
    distance_from_highway: float | None = Field(
        default=None, alias="distanceFromHighway", description="Metres from the nearest highway"
    )

    # Display strings as entered by the agent
    price: str | None = None
    roi: str | None = None
    area: str | None = None
    area_nepali: str | None = Field(default=None, alias="areaNepali")

    description: str | None = None
    images: list[str] = Field(default_factory=list)

    @field_validator("images", mode="before")
    @classmethod
    def parse_images(cls, v: Any) -> list[str]:
        """Accept NULL or JSON-decoded image lists."""
        if v is None:
            return []
        if isinstance(v, str):
            try:
                decoded = json.loads(v)
            except ValueError:
                return [v]
            return decoded if isinstance(decoded, list) else []
        return list(v)

    @property
    def has_coordinates(self) -> bool:
        """Whether both latitude and longitude are recorded."""
        return self.latitude is not None and self.longitude is not None

    def __str__(self) -> str:
        """String representation for console output."""
        return (
            f"[{self.id}] {self.title}\n"
            f"    💰 {self.price_npr if self.price_npr is not None else 'N/A'} NPR\n"
            f"    📍 {self.location or 'N/A'}\n"
            f"    🏠 {self.category_name or self.category_id} | "
            f"{self.area_sqft or 'N/A'} sq ft | {self.status or 'N/A'}"
        )
