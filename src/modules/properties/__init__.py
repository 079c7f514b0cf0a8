"""Properties module."""

from src.modules.properties.models import Property
from src.modules.properties.repository import (
    PropertyRepository,
    build_candidate_query,
)

__all__ = [
    "Property",
    "PropertyRepository",
    "build_candidate_query",
]
