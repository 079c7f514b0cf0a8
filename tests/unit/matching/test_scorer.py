"""
Unit tests for src/matching/scorer.py
"""

import math

import pytest

from src.matching.scorer import (
    LocationMode,
    haversine_km,
    resolve_location_mode,
    round2,
    round_half_up,
    safe_ratio_score,
    score_area,
    score_highway_distance,
    score_price,
    score_property,
    score_roi,
)
from src.modules.properties import Property
from src.modules.recommendations import Preferences

# 1 degree of latitude in km on a 6371 km sphere
KM_PER_DEGREE = 111.19492664455873


# ============================================================
# Numeric helper tests
# ============================================================


class TestRounding:
    """Tests for round_half_up / round2 functions."""

    def test_half_rounds_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1

    def test_not_bankers_rounding(self):
        """Python's round() gives 2 here; scores must give 3."""
        assert round(2.5) == 2
        assert round_half_up(2.5) == 3

    def test_round2(self):
        assert round2(12.345678) == 12.35
        assert round2(7.5) == 7.5
        assert round2(0) == 0


class TestSafeRatioScore:
    """Tests for safe_ratio_score function."""

    def test_zero_ratio_full_weight(self):
        assert safe_ratio_score(30, 0) == 30

    def test_linear(self):
        assert safe_ratio_score(30, 0.25) == 22.5

    def test_clamps_at_zero(self):
        assert safe_ratio_score(25, 1) == 0
        assert safe_ratio_score(25, 3.7) == 0


class TestHaversine:
    """Tests for haversine_km function."""

    def test_same_point(self):
        assert haversine_km(27.7, 85.3, 27.7, 85.3) == 0

    def test_one_degree_latitude(self):
        assert haversine_km(0, 0, 1, 0) == pytest.approx(KM_PER_DEGREE, rel=1e-9)

    def test_symmetric(self):
        a = haversine_km(27.7172, 85.324, 28.2096, 83.9856)
        b = haversine_km(28.2096, 83.9856, 27.7172, 85.324)
        assert a == pytest.approx(b)

    def test_kathmandu_to_pokhara(self):
        """Kathmandu to Pokhara is roughly 140 km as the crow flies."""
        assert 135 < haversine_km(27.7172, 85.324, 28.2096, 83.9856) < 150

    @pytest.mark.parametrize("lat", [-87.5, -82.0, -20.7, 0.0, 45.0])
    def test_antipodal_points(self, lat):
        """Opposite points on the globe are half a circumference apart."""
        half_circumference = math.pi * 6371
        distance = haversine_km(lat, 0, -lat, 180)
        assert distance == pytest.approx(half_circumference, rel=1e-6)


# ============================================================
# Location criterion tests
# ============================================================


class TestResolveLocationMode:
    """Tests for resolve_location_mode function."""

    def test_coordinates_win_over_text(self):
        prefs = Preferences(location="Kathmandu", latitude=27.7, longitude=85.3)
        assert resolve_location_mode(prefs) is LocationMode.COORDINATES

    def test_text_only(self):
        assert resolve_location_mode(Preferences(location="Kathmandu")) is LocationMode.TEXT

    def test_partial_coordinates_fall_back_to_text(self):
        prefs = Preferences(location="Kathmandu", latitude=27.7)
        assert resolve_location_mode(prefs) is LocationMode.TEXT

    def test_none(self):
        assert resolve_location_mode(Preferences()) is LocationMode.NONE
        assert resolve_location_mode(Preferences(longitude=85.3)) is LocationMode.NONE


class TestLocationScoring:
    """Tests for the location criterion through score_property."""

    def test_same_point_full_points(self, geo_property):
        prefs = Preferences(latitude=27.7, longitude=85.3)
        result = score_property(geo_property, prefs)
        assert result.max_possible == 25
        assert result.score == 25
        assert result.explanation[0].reason.startswith("Location scored by distance (0 km")

    def test_half_radius(self, geo_property):
        """5 km away with a 10 km radius earns half the weight."""
        prefs = Preferences(latitude=27.7 + 5 / KM_PER_DEGREE, longitude=85.3)
        result = score_property(geo_property, prefs)
        assert result.explanation[0].points == pytest.approx(12.5, abs=0.01)

    def test_beyond_radius_clamps_to_zero(self, geo_property):
        """20 km away with a 10 km radius scores 0, never negative."""
        prefs = Preferences(
            latitude=27.7 + 20 / KM_PER_DEGREE, longitude=85.3, location_radius_km=10
        )
        result = score_property(geo_property, prefs)
        assert result.explanation[0].points == 0
        assert result.score == 0
        assert result.max_possible == 25
        assert result.match_percentage == 0

    def test_custom_radius(self, geo_property):
        prefs = Preferences(
            latitude=27.7 + 20 / KM_PER_DEGREE, longitude=85.3, location_radius_km=40
        )
        result = score_property(geo_property, prefs)
        assert result.explanation[0].points == pytest.approx(12.5, abs=0.01)
        assert "radius 40 km" in result.explanation[0].reason

    @pytest.mark.parametrize("radius", [None, 0, -5])
    def test_default_radius(self, geo_property, radius):
        prefs = Preferences(latitude=27.7, longitude=85.3, location_radius_km=radius)
        result = score_property(geo_property, prefs)
        assert "radius 10 km" in result.explanation[0].reason

    def test_fallback_text_matched(self, sample_property):
        prefs = Preferences(location="kathmandu", latitude=27.7, longitude=85.3)
        result = score_property(sample_property, prefs)
        assert result.score == 25
        assert result.explanation[0].reason == (
            "Property coordinates missing, text location fallback matched (kathmandu)"
        )

    def test_fallback_text_not_matched(self, sample_property):
        prefs = Preferences(location="Pokhara", latitude=28.2, longitude=83.98)
        result = score_property(sample_property, prefs)
        assert result.score == 0
        assert result.max_possible == 25
        assert "fallback did not match" in result.explanation[0].reason

    def test_no_geo_possible(self, sample_property):
        prefs = Preferences(latitude=27.7, longitude=85.3)
        result = score_property(sample_property, prefs)
        assert result.max_possible == 25
        assert result.explanation[0].points == 0
        assert result.explanation[0].reason == (
            "Property coordinates missing, could not score geo-distance"
        )

    def test_text_mode(self, geo_property):
        result = score_property(geo_property, Preferences(location="BANESHWOR"))
        assert result.score == 25
        assert result.explanation[0].reason == "Location text matched preference (BANESHWOR)"

    def test_text_mode_no_match(self, geo_property):
        result = score_property(geo_property, Preferences(location="Pokhara"))
        assert result.score == 0
        assert result.max_possible == 25
        assert result.explanation[0].reason == "Location text did not match preference (Pokhara)"


# ============================================================
# Numeric criteria tests
# ============================================================


class TestScorePrice:
    """Tests for score_price function."""

    def test_exact_budget(self, sample_property):
        assert score_price(sample_property, 5_000_000).points == 30

    def test_symmetric(self):
        below = Property(title="a", category_id=1, price_npr=75)
        above = Property(title="b", category_id=1, price_npr=125)
        assert score_price(below, 100).points == 22.5
        assert score_price(above, 100).points == 22.5

    def test_double_budget_scores_zero(self):
        prop = Property(title="a", category_id=1, price_npr=300)
        assert score_price(prop, 100).points == 0

    def test_missing_price(self, bare_property):
        entry = score_price(bare_property, 100)
        assert entry.points == 0
        assert entry.reason == "Price missing, could not score budget closeness"

    def test_reason(self, sample_property):
        entry = score_price(sample_property, 5_000_000)
        assert entry.reason == "Budget closeness scored against NPR 5000000"

    def test_monotonic(self):
        """Moving the price closer to the budget never lowers the points."""
        budget = 1_000_000
        prices = [3_000_000, 2_000_000, 1_800_000, 1_500_000, 1_200_000, 1_000_000]
        points = [
            score_price(Property(title="x", category_id=1, price_npr=p), budget).points
            for p in prices
        ]
        assert points == sorted(points)


class TestScoreRoi:
    """Tests for score_roi function."""

    def test_meets_target(self):
        prop = Property(title="a", category_id=1, roi_percent=10)
        assert score_roi(prop, 10).points == 15

    def test_exceeds_target_not_penalized(self):
        prop = Property(title="a", category_id=1, roi_percent=25)
        assert score_roi(prop, 10).points == 15

    def test_below_target_scales(self):
        prop = Property(title="a", category_id=1, roi_percent=7.5)
        assert score_roi(prop, 10).points == 11.25

    def test_zero_roi(self):
        prop = Property(title="a", category_id=1, roi_percent=0)
        assert score_roi(prop, 10).points == 0

    def test_negative_roi_clamps(self):
        prop = Property(title="a", category_id=1, roi_percent=-4)
        assert score_roi(prop, 10).points == 0

    def test_missing_roi(self, sample_property):
        entry = score_roi(sample_property, 10)
        assert entry.points == 0
        assert entry.reason == "ROI missing, could not score ROI preference"


class TestScoreArea:
    """Tests for score_area function."""

    def test_exact(self, sample_property):
        assert score_area(sample_property, 1200).points == 15

    def test_decay(self):
        prop = Property(title="a", category_id=1, area_sqft=1500)
        assert score_area(prop, 1000).points == 7.5

    def test_floor(self):
        prop = Property(title="a", category_id=1, area_sqft=2500)
        assert score_area(prop, 1000).points == 0

    def test_missing(self, bare_property):
        assert score_area(bare_property, 1000).points == 0


class TestScoreHighwayDistance:
    """Tests for score_highway_distance function."""

    def test_within_bound(self, sample_property):
        assert score_highway_distance(sample_property, 1000).points == 15

    def test_at_bound(self, sample_property):
        assert score_highway_distance(sample_property, 500).points == 15

    def test_beyond_bound(self):
        prop = Property(title="a", category_id=1, distance_from_highway=1500)
        assert score_highway_distance(prop, 1000).points == 7.5

    def test_far_beyond_bound(self):
        prop = Property(title="a", category_id=1, distance_from_highway=2500)
        assert score_highway_distance(prop, 1000).points == 0

    def test_missing(self, bare_property):
        entry = score_highway_distance(bare_property, 1000)
        assert entry.points == 0
        assert entry.reason.startswith("Distance from highway missing")


# ============================================================
# score_property tests
# ============================================================


class TestScoreProperty:
    """Tests for score_property function."""

    def test_kathmandu_scenario(self, sample_property, sample_preferences):
        result = score_property(sample_property, sample_preferences)
        assert [e.points for e in result.explanation] == [25, 30, 15, 15]
        assert result.score == 85
        assert result.max_possible == 85
        assert result.match_percentage == 100

    def test_no_criteria(self, geo_property):
        result = score_property(geo_property, Preferences())
        assert result.score == 0
        assert result.max_possible == 0
        assert result.match_percentage == 0
        assert result.explanation == []

    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_preferences_skipped(self, geo_property, value):
        prefs = Preferences(
            budget=value, roi_percent=value, area_sqft=value, max_distance_from_highway=value
        )
        result = score_property(geo_property, prefs)
        assert result.max_possible == 0
        assert result.explanation == []

    def test_missing_fields_still_counted(self, bare_property):
        """Absent listing fields score 0 but count toward max_possible."""
        prefs = Preferences(
            budget=100, roi_percent=10, area_sqft=1000, max_distance_from_highway=500
        )
        result = score_property(bare_property, prefs)
        assert result.max_possible == 75
        assert len(result.explanation) == 4
        assert all(e.points == 0 for e in result.explanation)
        assert result.match_percentage == 0

    def test_explanation_order(self, geo_property):
        prefs = Preferences(
            max_distance_from_highway=500,
            area_sqft=900,
            roi_percent=5,
            budget=8_000_000,
            location="Baneshwor",
        )
        result = score_property(geo_property, prefs)
        reasons = [e.reason.split()[0] for e in result.explanation]
        assert reasons == ["Location", "Budget", "ROI", "Area", "Distance"]
        assert result.max_possible == 100
        assert result.score == 100

    def test_match_percentage_rounds(self, geo_property):
        """22.5 of 55 points is 40.9%, reported as 41."""
        prefs = Preferences(location="Pokhara", budget=6_400_000)
        result = score_property(geo_property, prefs)
        assert result.explanation[1].points == 22.5
        assert result.max_possible == 55
        assert result.match_percentage == 41

    def test_match_percentage_uses_max_possible(self):
        """15 of 45 points is 33.3%, reported as 33."""
        prop = Property(title="a", category_id=1, price_npr=150, roi_percent=0)
        prefs = Preferences(budget=100, roi_percent=10)
        result = score_property(prop, prefs)
        assert result.score == 15
        assert result.max_possible == 45
        assert result.match_percentage == 33

    def test_match_percentage_half_rounds_up(self):
        """3.75 of 30 points is exactly 12.5%, reported as 13."""
        prop = Property(title="a", category_id=1, price_npr=1500)
        result = score_property(prop, Preferences(budget=800))
        assert result.score == 3.75
        assert result.match_percentage == 13

    def test_score_is_rounded(self):
        prop = Property(title="a", category_id=1, price_npr=1, roi_percent=1)
        prefs = Preferences(budget=3, roi_percent=3)
        result = score_property(prop, prefs)
        # price: 30 * (1 - 2/3) = 10.0, roi: 15 * 1/3 = 5.0
        assert result.explanation[0].points == 10
        assert result.explanation[1].points == 5
        assert result.score == 15

    @pytest.mark.parametrize(
        "prefs",
        [
            Preferences(budget=1),
            Preferences(budget=10_000_000, roi_percent=1, area_sqft=50),
            Preferences(latitude=0, longitude=0, location_radius_km=0.001),
            Preferences(latitude=27.7, longitude=85.3, max_distance_from_highway=1),
            Preferences(location="nowhere", area_sqft=10_000_000),
        ],
    )
    def test_bounded(self, geo_property, sample_property, bare_property, prefs):
        for prop in (geo_property, sample_property, bare_property):
            result = score_property(prop, prefs)
            assert 0 <= result.score <= result.max_possible
            assert 0 <= result.match_percentage <= 100
