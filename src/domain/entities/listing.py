"""
Listing Entity

A classified ad for a property ("iklan").
"""

from datetime import datetime
from typing import List, Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Listing(SQLModel, table=True):
    """
    Listing entity - an ad owned by one user.

    Business Rules:
    - Only published listings are visible to anonymous readers
    - Only the owner may update or delete a listing
    - Facilities are stored comma-joined in facilities_csv
    """

    __tablename__ = "listings"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    body: str
    price: int = Field(ge=0)
    published: bool = Field(default=True)

    # Location
    address_line: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    postal_code: Optional[str] = None

    # Property
    area_sqm: Optional[int] = None
    rooms: Optional[int] = None
    bathrooms: Optional[int] = None
    facilities_csv: Optional[str] = None

    owner_id: int = Field(foreign_key="users.id", index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_listing_published_city", "published", "city"),)

    @staticmethod
    def to_csv(facilities: Optional[List[str]]) -> Optional[str]:
        if not facilities:
            return None
        cleaned = [f.strip() for f in facilities if f.strip()]
        return ",".join(cleaned) if cleaned else None

    @staticmethod
    def from_csv(value: Optional[str]) -> List[str]:
        if not value:
            return []
        return [f.strip() for f in value.split(",") if f.strip()]

    @property
    def facilities(self) -> List[str]:
        return Listing.from_csv(self.facilities_csv)
