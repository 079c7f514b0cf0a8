"""
Hard filter for property recommendations.

Excludes listings that violate any must-have constraint. The predicate
here must stay in lockstep with the catalog query built in
src/modules/properties/repository.py.
"""

from typing import Optional, Sequence

from loguru import logger

from src.modules.properties import Property
from src.modules.recommendations.criteria import MustHave

hard_filter_log = logger.bind(module="HardFilter")


def match_text_contains(text: Optional[str], needle: Optional[str]) -> bool:
    """
    Case-insensitive substring check.

    Examples:
        >>> match_text_contains("Baneshwor, Kathmandu", "kathmandu")
        True
        >>> match_text_contains("Lalitpur", "kathmandu")
        False
    """
    if not needle:
        return True
    return needle.lower() in (text or "").lower()


def match_minimum(value: Optional[float], minimum: Optional[float]) -> bool:
    """
    Check value >= minimum.

    A missing value fails whenever a minimum is set.
    """
    if minimum is None:
        return True
    if value is None:
        return False
    return value >= minimum


def match_maximum(value: Optional[float], maximum: Optional[float]) -> bool:
    """
    Check value <= maximum.

    A missing value fails whenever a maximum is set.
    """
    if maximum is None:
        return True
    if value is None:
        return False
    return value <= maximum


def matches_must_have(prop: Property, must_have: MustHave) -> bool:
    """
    Check if a listing satisfies every active must-have constraint.

    Matching logic:
    - location: listing location contains the text (case-insensitive)
    - category_id: exact match
    - status: case-insensitive exact match (not substring)
    - price / roi / area / distance: value must be recorded and within bounds

    Args:
        prop: Listing to check
        must_have: Hard constraints

    Returns:
        True if the listing passes all constraints
    """
    if must_have.location and not match_text_contains(prop.location, must_have.location):
        return False

    if must_have.category_id is not None and prop.category_id != must_have.category_id:
        return False

    if must_have.status and (prop.status or "").lower() != must_have.status.lower():
        return False

    # Price range
    if not match_minimum(prop.price_npr, must_have.min_price):
        return False
    if not match_maximum(prop.price_npr, must_have.max_price):
        return False

    if not match_minimum(prop.roi_percent, must_have.min_roi):
        return False

    if not match_minimum(prop.area_sqft, must_have.min_area):
        return False

    if not match_maximum(
        prop.distance_from_highway, must_have.max_distance_from_highway
    ):
        return False

    return True


def apply_hard_filters(
    properties: Sequence[Property],
    must_have: MustHave,
) -> list[Property]:
    """
    Keep only listings that satisfy all must-have constraints.

    Order is preserved and listings are not modified.

    Args:
        properties: Candidate listings
        must_have: Hard constraints

    Returns:
        Filtered listings in their original order
    """
    passed = [prop for prop in properties if matches_must_have(prop, must_have)]
    hard_filter_log.debug(
        f"Hard filter: {len(passed)} passed, {len(properties) - len(passed)} excluded"
    )
    return passed
