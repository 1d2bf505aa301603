from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import PasswordResetToken


class IPasswordResetTokenRepository(ABC):
    """PasswordResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[PasswordResetToken]:
        """Get password reset token by its exact value"""
        pass

    @abstractmethod
    async def mark_used(self, token_id: int) -> bool:
        """
        Flip used from False to True.

        Returns False when the token was already used, so only one caller
        can ever consume a given token.
        """
        pass
