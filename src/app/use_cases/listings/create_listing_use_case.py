import logging

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import AuthContext
from src.domain.entities import Listing
from src.domain.result import Result, Return
from .dtos import ListingInput, ListingRecord

logger = logging.getLogger(__name__)


class CreateListingUseCase:
    """Create a listing owned by the authenticated user"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: AuthContext, data: ListingInput) -> Result[ListingRecord]:
        async with self.uow:
            listing = Listing(
                **data.model_dump(exclude={"facilities"}),
                facilities_csv=Listing.to_csv(data.facilities),
                owner_id=ctx.user_id,
            )
            listing = await self.uow.listings.create(listing)
            await self.uow.commit()

            logger.info("Listing created: listing_id=%s owner_id=%s", listing.id, ctx.user_id)
            return Return.ok(ListingRecord.from_entity(listing))
