from typing import List, Optional

from sqlmodel import col, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.listing_repository import IListingRepository, ListingFilter
from src.domain.base import utcnow
from src.domain.entities import Listing


class ListingRepository(IListingRepository):
    """Listing repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def search_published(self, criteria: ListingFilter) -> List[Listing]:
        stmt = select(Listing).where(Listing.published == True)  # noqa: E712

        if criteria.city:
            stmt = stmt.where(Listing.city == criteria.city)
        if criteria.min_price is not None:
            stmt = stmt.where(Listing.price >= criteria.min_price)
        if criteria.max_price is not None:
            stmt = stmt.where(Listing.price <= criteria.max_price)
        if criteria.q:
            pattern = f"%{criteria.q}%"
            stmt = stmt.where(
                or_(
                    col(Listing.title).ilike(pattern),
                    col(Listing.body).ilike(pattern),
                    col(Listing.city).ilike(pattern),
                )
            )

        stmt = stmt.order_by(col(Listing.created_at).desc(), col(Listing.id).desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_id(self, listing_id: int) -> Optional[Listing]:
        """Get listing by ID"""
        stmt = select(Listing).where(Listing.id == listing_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, listing: Listing) -> Listing:
        """Create a new listing"""
        self.session.add(listing)
        await self.session.flush()
        await self.session.refresh(listing)
        return listing

    async def update(self, listing: Listing) -> Listing:
        """Update existing listing"""
        listing.updated_at = utcnow()
        self.session.add(listing)
        await self.session.flush()
        await self.session.refresh(listing)
        return listing

    async def delete(self, listing: Listing) -> None:
        """Delete listing"""
        await self.session.delete(listing)
        await self.session.flush()
