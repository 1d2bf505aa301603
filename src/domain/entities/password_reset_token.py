"""
PasswordResetToken Entity

Single-use password reset tokens.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class PasswordResetToken(SQLModel, table=True):
    """
    PasswordResetToken entity - single-use password reset tokens.

    Business Rules:
    - Token is 32 random bytes, hex encoded (64 chars)
    - Single-use: used flips False -> True once and never back
    - expires_at is optional; None means the token does not expire
    - Rows are kept as history after use
    """

    __tablename__ = "password_reset_tokens"

    id: Optional[int] = Field(default=None, primary_key=True)

    token: str = Field(unique=True, max_length=64)
    user_id: int = Field(foreign_key="users.id")

    used: bool = Field(default=False)

    # Timestamps
    expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_password_reset_user_id", "user_id"),)

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and self.expires_at <= now
