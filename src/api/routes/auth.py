from datetime import timedelta
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, status
from pydantic import AfterValidator, BaseModel, Field

from src.api.error import ClientError, ServerError
from src.api.utils.jwt import TokenCodec
from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_link_sender import ResetLinkSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
    LoginUseCase,
    ForgotPasswordUseCase,
    ResetPasswordUseCase,
    LoginResponse,
    ForgotPasswordResponse,
    ResetPasswordResponse,
)
from src.app.use_cases.validation import ensure_email
from src.depends import (
    get_config,
    get_password_hasher,
    get_reset_link_sender,
    get_token_codec,
    get_unit_of_work,
)
from src.domain.base import CamelModel

router = APIRouter(prefix="/auth", tags=["Authentication"])

# Grammar-checked but stored and compared exactly as sent
Email = Annotated[str, AfterValidator(ensure_email)]


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    email: Email = Field(..., description="User email address")
    password: str = Field(..., min_length=6, description="User password (min 6 chars)")
    name: Optional[str] = Field(default=None, description="Display name")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Register New User

    Raises:
        - 400 Bad Request: Invalid input
        - 409 Conflict: Email already exists
    """
    command = RegisterCommand(
        email=request.email, password=request.password, name=request.name
    )

    use_case = RegisterUseCase(uow, hasher)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: Email = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    token_codec: TokenCodec = Depends(get_token_codec),
):
    """
    Login and create token

    Returns a bearer token valid for 7 days.

    Raises:
        - 400 Bad Request: Invalid input
        - 401 Unauthorized: Invalid credentials (same for unknown email)
    """
    use_case = LoginUseCase(uow, hasher, token_codec)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    """Forgot password HTTP request payload"""

    email: Email = Field(..., description="User email address")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=ForgotPasswordResponse,
    response_model_exclude_none=True,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
    link_sender: Optional[ResetLinkSender] = Depends(get_reset_link_sender),
):
    """
    Request password reset

    Security:
        - No email enumeration (same response for unknown emails)
        - Token is 32 random bytes
        - Without FRONTEND_URL (testing mode) the token is returned
          in the body so it can be posted to /auth/reset-password

    Returns:
        - 200 OK: Always, for any well-formed email
    """
    token_ttl = None
    if config.RESET_TOKEN_TTL_MINUTES:
        token_ttl = timedelta(minutes=config.RESET_TOKEN_TTL_MINUTES)

    use_case = ForgotPasswordUseCase(
        uow,
        frontend_url=config.FRONTEND_URL,
        token_ttl=token_ttl,
        link_sender=link_sender,
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class ResetPasswordRequest(CamelModel):
    """Reset password HTTP request payload"""

    token: str = Field(..., min_length=10, description="Password reset token")
    new_password: str = Field(..., min_length=6, description="New password (min 6 chars)")


@router.post(
    "/reset-password", status_code=status.HTTP_200_OK, response_model=ResetPasswordResponse
)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Reset password with token

    Raises:
        - 400 Bad Request: Invalid input, or token unknown/used/expired
    """
    use_case = ResetPasswordUseCase(uow, hasher)
    result = await use_case.execute(request.token, request.new_password)

    if result.is_err():
        error = result.error
        if error.code in ("VALIDATION_ERROR", "INVALID_RESET_TOKEN"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
