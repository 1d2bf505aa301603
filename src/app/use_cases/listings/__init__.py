"""
Listing Use Cases

CRUD and search over listings (iklan).
"""

from .list_listings_use_case import ListListingsUseCase
from .get_listing_use_case import GetListingUseCase
from .create_listing_use_case import CreateListingUseCase
from .update_listing_use_case import UpdateListingUseCase
from .delete_listing_use_case import DeleteListingUseCase
from .dtos import (
    ListingInput,
    ListingPatch,
    ListingSummary,
    ListingDetail,
    ListingRecord,
)

__all__ = [
    # Use Cases
    "ListListingsUseCase",
    "GetListingUseCase",
    "CreateListingUseCase",
    "UpdateListingUseCase",
    "DeleteListingUseCase",
    # DTOs
    "ListingInput",
    "ListingPatch",
    "ListingSummary",
    "ListingDetail",
    "ListingRecord",
]
