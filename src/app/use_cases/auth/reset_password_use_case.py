"""
Reset Password Use Case

Consumes a reset token and sets a new password.
"""

import logging

from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import (
    MIN_PASSWORD_LENGTH,
    MIN_RESET_TOKEN_LENGTH,
    FieldErrors,
)
from src.domain.base import utcnow
from src.domain.result import Error, Result, Return
from .dtos import ResetPasswordResponse

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """
    Use case for resetting a password with a reset token.

    Business Rules:
    - Unknown, used and expired tokens all fail with INVALID_RESET_TOKEN
    - The token is consumed with a conditional update (used False -> True),
      so concurrent requests cannot both succeed
    - Marking the token used and changing the password commit together
    - New password hashed with bcrypt (cost factor 10)
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    def _validate(self, token: str, new_password: str) -> Result[None]:
        errors = FieldErrors()
        errors.check_min_length("token", token, MIN_RESET_TOKEN_LENGTH)
        errors.check_min_length("newPassword", new_password, MIN_PASSWORD_LENGTH)
        return errors.result()

    @staticmethod
    def _invalid_token() -> Result[ResetPasswordResponse]:
        return Return.err(Error("INVALID_RESET_TOKEN", "Invalid or already used token"))

    async def execute(self, token: str, new_password: str) -> Result[ResetPasswordResponse]:
        """
        Execute reset password use case.

        Args:
            token: Reset token as issued by forgot-password
            new_password: New password to set

        Returns:
            Result with confirmation message, or Error

        Errors:
            - VALIDATION_ERROR: token or password too short
            - INVALID_RESET_TOKEN: token unknown, used or expired
        """
        validation = self._validate(token, new_password)
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            reset_token = await self.uow.password_reset_tokens.get_by_token(token)

            if reset_token is None or reset_token.used or reset_token.is_expired(utcnow()):
                return self._invalid_token()

            password_hash = await self.hasher.hash_async(new_password)

            # Lost the race to a concurrent reset with the same token
            if not await self.uow.password_reset_tokens.mark_used(reset_token.id):
                return self._invalid_token()

            user = await self.uow.users.get_by_id(reset_token.user_id)
            if user is None:
                return self._invalid_token()

            user.password_hash = password_hash
            await self.uow.users.update(user)

            await self.uow.commit()

            logger.info("Password reset: user_id=%s token_id=%s", user.id, reset_token.id)
            return Return.ok(ResetPasswordResponse(message="Password updated successfully"))
