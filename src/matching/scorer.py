"""
Weighted scoring of a listing against buyer preferences.

Each active preference adds its weight to the maximum possible score and
emits one explanation entry, even when the listing earns 0 points for it.
Points are rounded per criterion before summing.
"""

import math
from enum import Enum

from src.modules.properties import Property
from src.modules.recommendations.criteria import Preferences
from src.modules.recommendations.models import Explanation, ScoreResult

WEIGHTS = {
    "location": 25,
    "price": 30,
    "roi": 15,
    "area": 15,
    "distance": 15,
}

EARTH_RADIUS_KM = 6371
DEFAULT_RADIUS_KM = 10


class LocationMode(Enum):
    """How the location criterion is scored."""

    COORDINATES = "coordinates"  # Preferred point given, distance decay
    TEXT = "text"  # Only preferred location text, substring match
    NONE = "none"  # Criterion skipped


# ============================================================
# Numeric helpers
# ============================================================


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round halves toward positive infinity, not to even.

    Examples:
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(0.125, 2)
        0.13
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round2(value: float) -> float:
    """Round to 2 decimal places (half up)."""
    return round_half_up(value, 2)


def safe_ratio_score(weight: float, delta_ratio: float) -> float:
    """
    Linear decay score: full weight at ratio 0, nothing at ratio >= 1.

    Examples:
        >>> safe_ratio_score(30, 0)
        30.0
        >>> safe_ratio_score(30, 0.5)
        15.0
        >>> safe_ratio_score(25, 2.0)
        0.0
    """
    return round2(weight * max(0.0, 1 - delta_ratio))


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Great-circle distance between two points in kilometers.

    Args:
        lat1, lng1: First point in degrees
        lat2, lng2: Second point in degrees

    Returns:
        Distance in km
    """
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lng / 2) ** 2
    )
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def format_number(value: float) -> str:
    """Render 5000000.0 as "5000000" and 7.5 as "7.5"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


# ============================================================
# Location criterion
# ============================================================


def resolve_location_mode(preferences: Preferences) -> LocationMode:
    """Coordinates win over text; neither means the criterion is skipped."""
    if preferences.has_coordinates:
        return LocationMode.COORDINATES
    if preferences.location:
        return LocationMode.TEXT
    return LocationMode.NONE


def _location_text_matches(prop: Property, text: str) -> bool:
    return text.lower() in (prop.location or "").lower()


def score_location_by_coordinates(
    prop: Property, preferences: Preferences
) -> Explanation:
    """Distance decay within the radius, with text fallback for listings without coordinates."""
    weight = WEIGHTS["location"]
    radius_km = preferences.location_radius_km
    if radius_km is None or radius_km <= 0:
        radius_km = DEFAULT_RADIUS_KM

    if prop.has_coordinates:
        distance_km = haversine_km(
            preferences.latitude,
            preferences.longitude,
            prop.latitude,
            prop.longitude,
        )
        return Explanation(
            reason=(
                f"Location scored by distance ({format_number(round2(distance_km))} km "
                f"from preferred point, radius {format_number(radius_km)} km)"
            ),
            points=safe_ratio_score(weight, distance_km / radius_km),
        )

    if preferences.location:
        matched = _location_text_matches(prop, preferences.location)
        verdict = "matched" if matched else "did not match"
        return Explanation(
            reason=(
                f"Property coordinates missing, text location fallback "
                f"{verdict} ({preferences.location})"
            ),
            points=weight if matched else 0,
        )

    return Explanation(
        reason="Property coordinates missing, could not score geo-distance",
        points=0,
    )


def score_location_by_text(prop: Property, preferences: Preferences) -> Explanation:
    """Binary substring match on the location text."""
    matched = _location_text_matches(prop, preferences.location)
    verdict = "matched" if matched else "did not match"
    return Explanation(
        reason=f"Location text {verdict} preference ({preferences.location})",
        points=WEIGHTS["location"] if matched else 0,
    )


# ============================================================
# Numeric criteria
# ============================================================


def score_price(prop: Property, budget: float) -> Explanation:
    """Symmetric linear decay around the budget."""
    if prop.price_npr is None:
        return Explanation(
            reason="Price missing, could not score budget closeness", points=0
        )
    return Explanation(
        reason=f"Budget closeness scored against NPR {format_number(budget)}",
        points=safe_ratio_score(
            WEIGHTS["price"], abs(prop.price_npr - budget) / budget
        ),
    )


def score_roi(prop: Property, preferred: float) -> Explanation:
    """Full points at or above the preferred ROI, linear scaling below it."""
    weight = WEIGHTS["roi"]
    if prop.roi_percent is None:
        return Explanation(reason="ROI missing, could not score ROI preference", points=0)

    if prop.roi_percent >= preferred:
        points = weight
    else:
        points = round2(weight * max(0.0, prop.roi_percent / preferred))
    return Explanation(
        reason=f"ROI scored against preferred {format_number(preferred)}%",
        points=points,
    )


def score_area(prop: Property, preferred: float) -> Explanation:
    """Symmetric linear decay around the preferred area."""
    if prop.area_sqft is None:
        return Explanation(
            reason="Area missing, could not score area preference", points=0
        )
    return Explanation(
        reason=f"Area closeness scored against {format_number(preferred)} sq ft",
        points=safe_ratio_score(
            WEIGHTS["area"], abs(prop.area_sqft - preferred) / preferred
        ),
    )


def score_highway_distance(prop: Property, max_distance: float) -> Explanation:
    """Full points within the bound, linear decay beyond it."""
    weight = WEIGHTS["distance"]
    distance = prop.distance_from_highway
    if distance is None:
        return Explanation(
            reason="Distance from highway missing, could not score distance preference",
            points=0,
        )

    if distance <= max_distance:
        points = weight
    else:
        points = safe_ratio_score(weight, (distance - max_distance) / max_distance)
    return Explanation(
        reason=f"Distance scored against preferred max {format_number(max_distance)}m",
        points=points,
    )


def _is_positive(value: float | None) -> bool:
    return value is not None and value > 0


# ============================================================
# Aggregation
# ============================================================


def score_property(prop: Property, preferences: Preferences) -> ScoreResult:
    """
    Score a listing against buyer preferences.

    Criteria are evaluated in a fixed order (location, price, roi, area,
    distance). Inactive criteria contribute to neither score nor
    max_possible and produce no explanation.

    Args:
        prop: Listing to score
        preferences: Soft criteria

    Returns:
        ScoreResult with score, max_possible, match_percentage and explanation
    """
    scored: list[tuple[str, Explanation]] = []

    mode = resolve_location_mode(preferences)
    if mode is LocationMode.COORDINATES:
        scored.append(("location", score_location_by_coordinates(prop, preferences)))
    elif mode is LocationMode.TEXT:
        scored.append(("location", score_location_by_text(prop, preferences)))

    if _is_positive(preferences.budget):
        scored.append(("price", score_price(prop, preferences.budget)))

    if _is_positive(preferences.roi_percent):
        scored.append(("roi", score_roi(prop, preferences.roi_percent)))

    if _is_positive(preferences.area_sqft):
        scored.append(("area", score_area(prop, preferences.area_sqft)))

    if _is_positive(preferences.max_distance_from_highway):
        scored.append(
            ("distance", score_highway_distance(prop, preferences.max_distance_from_highway))
        )

    max_possible = sum(WEIGHTS[criterion] for criterion, _ in scored)
    total = sum(entry.points for _, entry in scored)
    score = round2(total)

    match_percentage = 0
    if max_possible:
        match_percentage = int(round_half_up(total / max_possible * 100))

    return ScoreResult(
        score=score,
        max_possible=max_possible,
        match_percentage=match_percentage,
        explanation=[entry for _, entry in scored],
    )
