from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from src.domain.entities import Listing


@dataclass(frozen=True)
class ListingFilter:
    """Search criteria for published listings"""

    city: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    q: Optional[str] = None


class IListingRepository(ABC):
    """Listing repository interface - application layer"""

    @abstractmethod
    async def search_published(self, criteria: ListingFilter) -> List[Listing]:
        """Published listings matching criteria, newest first"""
        pass

    @abstractmethod
    async def get_by_id(self, listing_id: int) -> Optional[Listing]:
        """Get listing by ID"""
        pass

    @abstractmethod
    async def create(self, listing: Listing) -> Listing:
        """Create a new listing"""
        pass

    @abstractmethod
    async def update(self, listing: Listing) -> Listing:
        """Update existing listing"""
        pass

    @abstractmethod
    async def delete(self, listing: Listing) -> None:
        """Delete listing"""
        pass
