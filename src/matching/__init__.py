"""
Matching module for property recommendations.

This module provides the hard filter that excludes listings violating
must-have constraints and the weighted scorer that ranks the rest.
"""

from src.matching.hard_filter import (
    apply_hard_filters,
    match_maximum,
    match_minimum,
    match_text_contains,
    matches_must_have,
)
from src.matching.scorer import (
    WEIGHTS,
    LocationMode,
    haversine_km,
    resolve_location_mode,
    round2,
    round_half_up,
    safe_ratio_score,
    score_property,
)

__all__ = [
    # Hard filter
    "match_text_contains",
    "match_minimum",
    "match_maximum",
    "matches_must_have",
    "apply_hard_filters",
    # Numeric helpers
    "round_half_up",
    "round2",
    "safe_ratio_score",
    "haversine_km",
    # Scoring
    "WEIGHTS",
    "LocationMode",
    "resolve_location_mode",
    "score_property",
]
