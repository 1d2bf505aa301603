import logging

from src.app.repositories.user_repository import EmailAlreadyExistsError
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import MIN_PASSWORD_LENGTH, FieldErrors
from src.domain.entities import User
from src.domain.result import Error, Result, Return
from .dtos import RegisterCommand, RegisterResponse

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Validate email grammar and password length (min 6)
    2. Hash password with bcrypt (cost factor 10)
    3. Insert User; a duplicate email is detected by the unique
       constraint at insert time, never by a pre-check
    4. Commit and return id + email
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    def _validate(self, command: RegisterCommand) -> Result[None]:
        errors = FieldErrors()
        errors.check_email("email", command.email)
        errors.check_min_length("password", command.password, MIN_PASSWORD_LENGTH)
        return errors.result()

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with email, password, optional name

        Returns:
            Result[RegisterResponse]
            or Error(VALIDATION_ERROR) / Error(EMAIL_ALREADY_EXISTS)
        """
        validation = self._validate(command)
        if validation.is_err():
            return Return.err(validation.error)

        password_hash = await self.hasher.hash_async(command.password)

        async with self.uow:
            user = User(
                email=command.email,
                password_hash=password_hash,
                name=command.name,
            )
            try:
                user = await self.uow.users.create(user)
            except EmailAlreadyExistsError:
                return Return.err(Error("EMAIL_ALREADY_EXISTS", "Email exists"))

            await self.uow.commit()

            logger.info("User registered: user_id=%s", user.id)
            return Return.ok(RegisterResponse(id=user.id, email=user.email))
