from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Error, Result, Return
from .dtos import ListingDetail


class GetListingUseCase:
    """Public detail of one listing; unpublished ones read as missing"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, listing_id: int) -> Result[ListingDetail]:
        async with self.uow:
            listing = await self.uow.listings.get_by_id(listing_id)
            if listing is None or not listing.published:
                return Return.err(Error("NOT_FOUND", "Not found"))
            return Return.ok(ListingDetail.from_entity(listing))
