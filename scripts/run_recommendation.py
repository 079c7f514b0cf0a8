#!/usr/bin/env python3
"""
Run the recommendation pipeline against the configured database.

Usage:
    uv run python scripts/run_recommendation.py --location Kathmandu --budget 5000000
    uv run python scripts/run_recommendation.py --min-price 3000000 --max-price 8000000 \
        --preferred-area 1200 --limit 5 --explain
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from src.connections.google_maps import get_google_maps
from src.connections.postgres import close_postgres, get_postgres
from src.modules.properties import PropertyRepository
from src.modules.recommendations import MustHave, Preferences, RecommendationRequest
from src.modules.recommendations.service import (
    InvalidConstraintsError,
    RecommendationService,
)


def build_request(args: argparse.Namespace) -> RecommendationRequest:
    """Map command line arguments onto a recommendation request."""
    return RecommendationRequest(
        must_have=MustHave(
            location=args.must_location,
            category_id=args.category,
            status=args.status,
            min_price=args.min_price,
            max_price=args.max_price,
            min_roi=args.min_roi,
            min_area=args.min_area,
            max_distance_from_highway=args.max_distance,
        ),
        preferences=Preferences(
            location=args.location,
            latitude=args.lat,
            longitude=args.lng,
            location_radius_km=args.radius,
            budget=args.budget,
            roi_percent=args.preferred_roi,
            area_sqft=args.preferred_area,
            max_distance_from_highway=args.preferred_distance,
        ),
        page=args.page,
        limit=args.limit,
    )


async def main(args: argparse.Namespace):
    """Build one page of recommendations and print it."""
    request = build_request(args)

    print(f"\n{'=' * 60}")
    print("Property Recommendations")
    print(f"{'=' * 60}\n")

    try:
        postgres = await get_postgres()
        service = RecommendationService(
            catalog=PropertyRepository(postgres.pool),
            geocoder=get_google_maps(),
        )
        result = await service.recommend(request)

        pagination = result.pagination
        print(
            f"Page {pagination.page}/{pagination.total_pages} "
            f"({pagination.total} matches)\n"
        )

        for i, item in enumerate(result.data, 1):
            print(f"--- #{i}: {item.score} pts ({item.match_percentage}%) ---")
            print(item.property)
            if args.explain:
                print(
                    json.dumps(
                        [e.model_dump() for e in item.explanation],
                        ensure_ascii=False,
                        indent=2,
                    )
                )
            print()

    except InvalidConstraintsError as e:
        print(f"Error: {e}")

    finally:
        await close_postgres()


def build_parser() -> argparse.ArgumentParser:
    """Command line options, grouped as must-have and preferences."""
    parser = argparse.ArgumentParser(description="Run property recommendations")
    must = parser.add_argument_group("must-have")
    must.add_argument("--must-location", help="Location substring the listing must contain")
    must.add_argument("--category", type=int, help="Category ID")
    must.add_argument("--status", help="Listing status, e.g. available")
    must.add_argument("--min-price", type=float)
    must.add_argument("--max-price", type=float)
    must.add_argument("--min-roi", type=float)
    must.add_argument("--min-area", type=float)
    must.add_argument("--max-distance", type=float, help="Max metres from highway")

    prefs = parser.add_argument_group("preferences")
    prefs.add_argument("--location", help="Preferred location (geocoded if possible)")
    prefs.add_argument("--lat", type=float)
    prefs.add_argument("--lng", type=float)
    prefs.add_argument("--radius", type=float, help="Search radius in km (default 10)")
    prefs.add_argument("--budget", type=float)
    prefs.add_argument("--preferred-roi", type=float)
    prefs.add_argument("--preferred-area", type=float)
    prefs.add_argument("--preferred-distance", type=float, help="Metres from highway")

    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--limit", type=int, default=10)
    parser.add_argument("--explain", action="store_true", help="Show score breakdown")
    return parser


if __name__ == "__main__":
    load_dotenv()
    asyncio.run(main(build_parser().parse_args()))
