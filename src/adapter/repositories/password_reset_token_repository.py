from typing import Optional

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from src.domain.entities import PasswordResetToken


class PasswordResetTokenRepository(IPasswordResetTokenRepository):
    """PasswordResetToken repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def get_by_token(self, token: str) -> Optional[PasswordResetToken]:
        """Get password reset token by its exact value"""
        stmt = select(PasswordResetToken).where(PasswordResetToken.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def mark_used(self, token_id: int) -> bool:
        """Conditional update: only the first caller sees rowcount == 1"""
        stmt = (
            update(PasswordResetToken)
            .where(PasswordResetToken.id == token_id)
            .where(PasswordResetToken.used == False)  # noqa: E712
            .values(used=True)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1
