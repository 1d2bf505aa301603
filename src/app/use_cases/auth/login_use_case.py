"""
Login Use Case

Authenticates a user and issues a session credential.
"""

from src.api.utils.jwt import TokenCodec
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Error, Result, Return
from .dtos import LoginResponse


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email and wrong password produce the same error
    - A dummy bcrypt check runs for unknown emails so both paths cost
      the same
    - Token carries userId and email, valid for 7 days
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, token_codec: TokenCodec):
        self.uow = uow
        self.hasher = hasher
        self.token_codec = token_codec

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing the token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                await self.hasher.burn_async(password)
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid credentials"))

            if not await self.hasher.verify_async(password, user.password_hash):
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid credentials"))

            token = self.token_codec.issue_for(user.id, user.email)
            return Return.ok(LoginResponse(token=token))
