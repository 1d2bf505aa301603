"""
User Entity

Represents a registered account able to log in and own listings.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - a registered account.

    Business Rules:
    - Email must be unique across all users (enforced by the unique index)
    - Password stored as bcrypt hash (cost factor 10), never returned
    - password_hash only changes through a successful password reset
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    name: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
