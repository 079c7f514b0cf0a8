"""
Property Repository.

Data access layer for the property catalog.
"""

from typing import Any

from asyncpg import Pool
from loguru import logger

from src.modules.properties.models import Property
from src.modules.recommendations.base import ListingCatalog
from src.modules.recommendations.criteria import MustHave

properties_log = logger.bind(module="Properties")

BASE_QUERY = """
SELECT
    p.id, p.title, p.location, p.category_id, c.name AS category_name,
    p.status, p.latitude, p.longitude,
    p.price, p.price_npr, p.roi, p.roi_percent,
    p.area, p.area_sqft, p.area_nepali, p.distance_from_highway,
    p.description, p.images
FROM properties p
LEFT JOIN categories c ON c.id = p.category_id
"""


def escape_like(text: str) -> str:
    r"""
    Escape LIKE wildcards so user text is matched literally.

    Examples:
        >>> escape_like("50%_off")
        '50\\%\\_off'
    """
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_candidate_query(must_have: MustHave) -> tuple[str, list[Any]]:
    """
    Translate must-have constraints into a catalog query.

    Each condition mirrors matches_must_have() in src/matching/hard_filter.py.
    NULL columns fail comparisons in SQL, which matches the rule that a
    missing value fails any bound set on it.

    Args:
        must_have: Hard constraints

    Returns:
        Tuple of (query, args) for asyncpg
    """
    conditions: list[str] = []
    args: list[Any] = []

    def add(condition: str, value: Any) -> None:
        args.append(value)
        conditions.append(condition.format(idx=len(args)))

    if must_have.location:
        add("p.location ILIKE ${idx} ESCAPE '\\'", f"%{escape_like(must_have.location)}%")

    if must_have.category_id is not None:
        add("p.category_id = ${idx}", must_have.category_id)

    if must_have.status:
        add("LOWER(p.status) = LOWER(${idx})", must_have.status)

    # Price range
    if must_have.min_price is not None:
        add("p.price_npr >= ${idx}", must_have.min_price)
    if must_have.max_price is not None:
        add("p.price_npr <= ${idx}", must_have.max_price)

    if must_have.min_roi is not None:
        add("p.roi_percent >= ${idx}", must_have.min_roi)

    if must_have.min_area is not None:
        add("p.area_sqft >= ${idx}", must_have.min_area)

    if must_have.max_distance_from_highway is not None:
        add("p.distance_from_highway <= ${idx}", must_have.max_distance_from_highway)

    query = BASE_QUERY
    if conditions:
        query += "WHERE " + "\n  AND ".join(conditions) + "\n"
    query += "ORDER BY p.id"
    return query, args


class PropertyRepository(ListingCatalog):
    """Repository for property catalog operations."""

    def __init__(self, pool: Pool):
        """
        Initialize repository with database connection pool.

        Args:
            pool: asyncpg connection pool
        """
        self._pool = pool

    async def find(self, must_have: MustHave) -> list[Property]:
        """
        Fetch candidate listings matching the column-level constraints.

        Args:
            must_have: Hard constraints

        Returns:
            List of Property objects in catalog order
        """
        query, args = build_candidate_query(must_have)

        async with self._pool.acquire() as conn:
            rows = await conn.fetch(query, *args)

        properties_log.debug(f"Catalog returned {len(rows)} candidates")
        return [Property.model_validate(dict(row)) for row in rows]

