from typing import List

from src.app.repositories.listing_repository import ListingFilter
from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Result, Return
from .dtos import ListingSummary


class ListListingsUseCase:
    """
    Public search over published listings.

    Business Rules:
    - Unpublished listings never appear
    - city is an exact match, price bounds are inclusive
    - q matches title, body or city, case-insensitively
    - Newest first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, criteria: ListingFilter) -> Result[List[ListingSummary]]:
        async with self.uow:
            listings = await self.uow.listings.search_published(criteria)
            return Return.ok([ListingSummary.from_entity(listing) for listing in listings])
