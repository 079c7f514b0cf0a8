"""
Google Maps Connection Module.

Geocoding and place autocomplete via the Google Maps web services.
Lookups are best effort: a missing API key, a non-OK status, a malformed
payload or a transport error yields no result instead of an exception.
"""

from typing import Any, Optional

import httpx
from loguru import logger
from pydantic import BaseModel

from config.settings import get_settings
from src.modules.recommendations.base import Geocoder
from src.modules.recommendations.criteria import Coordinates

geo_log = logger.bind(module="Geocoding")

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
AUTOCOMPLETE_URL = "https://maps.googleapis.com/maps/api/place/autocomplete/json"


class LocationSuggestion(BaseModel):
    """A place autocomplete suggestion."""

    placeId: str
    description: str


class GoogleMapsClient(Geocoder):
    """Async client for Google geocoding and places autocomplete."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize client.

        Args:
            api_key: Google Maps API key (defaults to GOOGLE_MAPS_API_KEY)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        settings = get_settings().google_maps
        self.api_key = settings.api_key if api_key is None else api_key
        self.timeout = settings.timeout_seconds if timeout is None else timeout
        self._transport = transport

    @property
    def enabled(self) -> bool:
        """Whether an API key is configured."""
        return bool(self.api_key)

    async def _get_json(self, url: str, params: dict[str, str]) -> Optional[dict[str, Any]]:
        """GET a JSON payload, returning None on any transport or decode error."""
        params = {**params, "key": self.api_key}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                resp = await client.get(url, params=params)
                payload = resp.json()
        except httpx.HTTPError as e:
            geo_log.warning(f"Request to {url} failed: {e}")
            return None
        except ValueError as e:
            geo_log.warning(f"Invalid JSON from {url}: {e}")
            return None

        if not isinstance(payload, dict):
            geo_log.warning(f"Unexpected payload from {url}: {type(payload).__name__}")
            return None
        return payload

    async def geocode(self, address: str) -> Optional[Coordinates]:
        """
        Resolve an address to coordinates.

        Args:
            address: Free-text address, e.g. "Baneshwor, Kathmandu"

        Returns:
            Coordinates of the first result, or None if unavailable
        """
        if not self.enabled:
            geo_log.debug("Geocoding disabled: GOOGLE_MAPS_API_KEY is not set")
            return None
        if not address or not address.strip():
            return None

        payload = await self._get_json(GEOCODE_URL, {"address": address})
        if payload is None:
            return None

        status = payload.get("status")
        if status != "OK":
            geo_log.info(f"Geocoding '{address}' returned status {status}")
            return None

        try:
            point = payload["results"][0]["geometry"]["location"]
            lat, lng = point["lat"], point["lng"]
        except (KeyError, IndexError, TypeError):
            geo_log.warning(f"Geocoding '{address}' returned no usable location")
            return None

        if not isinstance(lat, (int, float)) or not isinstance(lng, (int, float)):
            return None

        geo_log.debug(f"Geocoded '{address}' to ({lat}, {lng})")
        return Coordinates(latitude=lat, longitude=lng)

    async def autocomplete(self, query: str) -> list[LocationSuggestion]:
        """
        Suggest places for a partial address.

        Args:
            query: Partial address text

        Returns:
            List of suggestions (empty on any failure)
        """
        if not self.enabled:
            geo_log.error("Google autocomplete disabled: GOOGLE_MAPS_API_KEY is not set")
            return []
        if not query or not query.strip():
            return []

        payload = await self._get_json(
            AUTOCOMPLETE_URL, {"input": query, "types": "geocode"}
        )
        if payload is None:
            return []

        status = payload.get("status")
        if status not in ("OK", "ZERO_RESULTS"):
            geo_log.error(f"Google Places autocomplete failed with status: {status}")
            return []

        suggestions = []
        for item in payload.get("predictions") or []:
            place_id = item.get("place_id") or ""
            description = item.get("description") or ""
            if place_id and description:
                suggestions.append(
                    LocationSuggestion(placeId=place_id, description=description)
                )
        return suggestions


# Singleton instance
_google_maps: Optional[GoogleMapsClient] = None


def get_google_maps() -> GoogleMapsClient:
    """Get Google Maps client singleton."""
    global _google_maps
    if _google_maps is None:
        _google_maps = GoogleMapsClient()
    return _google_maps
