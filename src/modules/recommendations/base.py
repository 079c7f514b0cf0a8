"""
Base Collaborators Module.

Defines the interfaces the recommendation pipeline depends on.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.modules.properties.models import Property
from src.modules.recommendations.criteria import Coordinates, MustHave


class ListingCatalog(ABC):
    """
    Source of candidate listings.

    Implementations may pre-filter on column-level constraints; the
    pipeline re-applies the full hard filter afterwards.
    """

    @abstractmethod
    async def find(self, must_have: MustHave) -> list[Property]:
        """
        Fetch listings matching the column-level constraints.

        Args:
            must_have: Hard constraints

        Returns:
            Candidate listings in catalog order
        """
        pass


class Geocoder(ABC):
    """Address to coordinates lookup."""

    @abstractmethod
    async def geocode(self, address: str) -> Optional[Coordinates]:
        """
        Resolve an address.

        Args:
            address: Free-text address

        Returns:
            Coordinates, or None if the address cannot be resolved
        """
        pass
