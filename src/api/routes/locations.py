"""Location autocomplete routes."""

from fastapi import APIRouter, HTTPException

from src.api.dependencies import GoogleMapsDep

router = APIRouter(prefix="/locations", tags=["Locations"])

MIN_QUERY_LENGTH = 2


@router.get("/autocomplete")
async def autocomplete(google_maps: GoogleMapsDep, q: str = "") -> dict:
    """
    Suggest locations for a partial address.

    Args:
        q: Partial address text (at least 2 characters)
    """
    if not google_maps.enabled:
        raise HTTPException(
            status_code=500,
            detail="GOOGLE_MAPS_API_KEY is not configured on the backend",
        )

    query = q.strip()
    if len(query) < MIN_QUERY_LENGTH:
        return {"data": []}

    suggestions = await google_maps.autocomplete(query)
    return {"data": [s.model_dump() for s in suggestions]}
