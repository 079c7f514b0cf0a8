"""
Shared pytest fixtures for all tests.
"""

import pytest

from src.modules.properties import Property
from src.modules.recommendations import MustHave, Preferences


# ============================================================
# Sample Data Fixtures
# ============================================================


@pytest.fixture
def sample_property() -> Property:
    """Listing without coordinates or ROI (Kathmandu, NPR 5,000,000)."""
    return Property(
        id=1,
        title="House for sale in Kathmandu",
        location="Kathmandu",
        category_id=1,
        status="Available",
        price_npr=5_000_000,
        area_sqft=1200,
        distance_from_highway=500,
    )


@pytest.fixture
def geo_property() -> Property:
    """Listing with every field recorded, located at Baneshwor."""
    return Property(
        id=2,
        title="Apartment in Baneshwor",
        location="Baneshwor, Kathmandu",
        category_id=2,
        status="Available",
        latitude=27.7,
        longitude=85.3,
        price_npr=8_000_000,
        roi_percent=8.5,
        area_sqft=900,
        distance_from_highway=200,
    )


@pytest.fixture
def bare_property() -> Property:
    """Listing with none of the optional numeric fields recorded."""
    return Property(
        id=3,
        title="Land in Lalitpur",
        location="Lalitpur",
        category_id=3,
        status="Sold",
    )


@pytest.fixture
def sample_preferences() -> Preferences:
    """Text-only preferences matching sample_property exactly."""
    return Preferences(
        location="Kathmandu",
        budget=5_000_000,
        area_sqft=1200,
        max_distance_from_highway=1000,
    )


@pytest.fixture
def empty_must_have() -> MustHave:
    """Must-have with no active constraint."""
    return MustHave()
