import logging

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import AuthContext
from src.domain.entities import Listing
from src.domain.result import Error, Result, Return
from .dtos import ListingPatch, ListingRecord

logger = logging.getLogger(__name__)

# Columns that cannot be cleared with an explicit null
NON_NULLABLE = {"title", "body", "price", "published"}


class UpdateListingUseCase:
    """
    Partially update a listing owned by the caller.

    Business Rules:
    - Missing listing and someone else's listing both read as NOT_FOUND
    - Only fields present in the payload change
    - facilities replaces the stored list only when supplied
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: AuthContext, listing_id: int, patch: ListingPatch
    ) -> Result[ListingRecord]:
        async with self.uow:
            listing = await self.uow.listings.get_by_id(listing_id)
            if listing is None or listing.owner_id != ctx.user_id:
                return Return.err(Error("NOT_FOUND", "Not found"))

            changes = patch.model_dump(exclude_unset=True)
            facilities = changes.pop("facilities", None)

            for field, value in changes.items():
                if value is None and field in NON_NULLABLE:
                    continue
                setattr(listing, field, value)
            if facilities is not None:
                listing.facilities_csv = Listing.to_csv(facilities)

            listing = await self.uow.listings.update(listing)
            await self.uow.commit()

            logger.info("Listing updated: listing_id=%s owner_id=%s", listing_id, ctx.user_id)
            return Return.ok(ListingRecord.from_entity(listing))
