"""
Listing Use Case DTOs

Inputs and outputs of the listing (iklan) use cases. All of them travel
over HTTP with camelCase keys.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from src.domain.base import CamelModel
from src.domain.entities import Listing


# ============================================================================
# Command DTOs
# ============================================================================


class ListingInput(CamelModel):
    """Full listing payload for creation"""

    title: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)
    price: int = Field(..., ge=0)
    published: bool = True

    address_line: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    postal_code: Optional[str] = None

    area_sqm: Optional[int] = Field(default=None, ge=0)
    rooms: Optional[int] = Field(default=None, ge=0)
    bathrooms: Optional[int] = Field(default=None, ge=0)

    facilities: List[str] = Field(default_factory=list)


class ListingPatch(CamelModel):
    """Partial listing payload; only fields actually sent are applied"""

    title: Optional[str] = Field(default=None, min_length=1)
    body: Optional[str] = Field(default=None, min_length=1)
    price: Optional[int] = Field(default=None, ge=0)
    published: Optional[bool] = None

    address_line: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    postal_code: Optional[str] = None

    area_sqm: Optional[int] = Field(default=None, ge=0)
    rooms: Optional[int] = Field(default=None, ge=0)
    bathrooms: Optional[int] = Field(default=None, ge=0)

    facilities: Optional[List[str]] = None


# ============================================================================
# Response DTOs
# ============================================================================


class ListingSummary(CamelModel):
    """Row of the public listing search"""

    id: int
    title: str
    price: int
    city: Optional[str] = None
    province: Optional[str] = None
    area_sqm: Optional[int] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, listing: Listing) -> "ListingSummary":
        return cls(
            id=listing.id,
            title=listing.title,
            price=listing.price,
            city=listing.city,
            province=listing.province,
            area_sqm=listing.area_sqm,
            created_at=listing.created_at,
        )


class ListingLocation(CamelModel):
    address_line: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    postal_code: Optional[str] = None


class ListingProperty(CamelModel):
    area_sqm: Optional[int] = None
    rooms: Optional[int] = None
    bathrooms: Optional[int] = None
    facilities: List[str] = Field(default_factory=list)


class ListingDetail(CamelModel):
    """Public detail view of a published listing"""

    id: int
    title: str
    body: str
    price: int
    published: bool
    location: ListingLocation
    property_info: ListingProperty = Field(alias="property")
    created_at: datetime

    @classmethod
    def from_entity(cls, listing: Listing) -> "ListingDetail":
        return cls(
            id=listing.id,
            title=listing.title,
            body=listing.body,
            price=listing.price,
            published=listing.published,
            location=ListingLocation(
                address_line=listing.address_line,
                city=listing.city,
                province=listing.province,
                postal_code=listing.postal_code,
            ),
            property_info=ListingProperty(
                area_sqm=listing.area_sqm,
                rooms=listing.rooms,
                bathrooms=listing.bathrooms,
                facilities=listing.facilities,
            ),
            created_at=listing.created_at,
        )


class ListingRecord(CamelModel):
    """Full stored listing, returned to its owner after a write"""

    id: int
    title: str
    body: str
    price: int
    published: bool
    address_line: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    postal_code: Optional[str] = None
    area_sqm: Optional[int] = None
    rooms: Optional[int] = None
    bathrooms: Optional[int] = None
    facilities: List[str] = Field(default_factory=list)
    owner_id: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, listing: Listing) -> "ListingRecord":
        return cls(
            id=listing.id,
            title=listing.title,
            body=listing.body,
            price=listing.price,
            published=listing.published,
            address_line=listing.address_line,
            city=listing.city,
            province=listing.province,
            postal_code=listing.postal_code,
            area_sqm=listing.area_sqm,
            rooms=listing.rooms,
            bathrooms=listing.bathrooms,
            facilities=listing.facilities,
            owner_id=listing.owner_id,
            created_at=listing.created_at,
            updated_at=listing.updated_at,
        )
