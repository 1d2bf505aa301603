"""
Forgot Password Use Case

Generates a single-use password reset token.
"""

import logging
from datetime import timedelta
from typing import Optional

from src.app.services.reset_link_sender import ResetLinkSender
from src.app.services.reset_token import generate_reset_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import PasswordResetToken
from src.domain.result import Result, Return
from .dtos import ForgotPasswordResponse

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "If the email exists, a reset link will be sent"
TESTING_MESSAGE = "Reset link generated (testing mode)"
TESTING_HINT = "POST to /auth/reset-password with { token, newPassword }"


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - No email enumeration: unknown emails get the generic message
    - Token is 32 random bytes, hex encoded, stored with used=False
    - expires_at is set only when a token TTL is configured
    - With a front-end URL the response stays generic and the link
      goes to the link sender, if one is wired
    - Without one (testing mode) the token is echoed back with a hint
    """

    def __init__(
        self,
        uow: UnitOfWork,
        frontend_url: Optional[str] = None,
        token_ttl: Optional[timedelta] = None,
        link_sender: Optional[ResetLinkSender] = None,
    ):
        self.uow = uow
        self.frontend_url = frontend_url.rstrip("/") if frontend_url else None
        self.token_ttl = token_ttl
        self.link_sender = link_sender

    def build_reset_link(self, token: str) -> Optional[str]:
        if not self.frontend_url:
            return None
        return f"{self.frontend_url}/reset-password?token={token}"

    async def execute(self, email: str) -> Result[ForgotPasswordResponse]:
        """
        Execute forgot password use case.

        Args:
            email: User's email address

        Returns:
            Result with ForgotPasswordResponse. Never an error for an
            unknown email.
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                return Return.ok(ForgotPasswordResponse(message=GENERIC_MESSAGE))

            token = generate_reset_token()
            expires_at = utcnow() + self.token_ttl if self.token_ttl else None

            reset_token = PasswordResetToken(
                token=token,
                user_id=user.id,
                used=False,
                expires_at=expires_at,
            )
            await self.uow.password_reset_tokens.create(reset_token)
            await self.uow.commit()

            logger.info(
                "Password reset token issued: user_id=%s token_id=%s",
                user.id,
                reset_token.id,
            )

            if self.frontend_url:
                if self.link_sender is not None:
                    await self.link_sender.send(user.email, self.build_reset_link(token))
                return Return.ok(ForgotPasswordResponse(message=GENERIC_MESSAGE))

            return Return.ok(
                ForgotPasswordResponse(message=TESTING_MESSAGE, token=token, hint=TESTING_HINT)
            )
