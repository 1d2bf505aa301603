import logging

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import AuthContext
from src.domain.result import Error, Result, Return

logger = logging.getLogger(__name__)


class DeleteListingUseCase:
    """Delete a listing owned by the caller"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: AuthContext, listing_id: int) -> Result[None]:
        async with self.uow:
            listing = await self.uow.listings.get_by_id(listing_id)
            if listing is None or listing.owner_id != ctx.user_id:
                return Return.err(Error("NOT_FOUND", "Not found"))

            await self.uow.listings.delete(listing)
            await self.uow.commit()

            logger.info("Listing deleted: listing_id=%s owner_id=%s", listing_id, ctx.user_id)
            return Return.ok(None)
