from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import InvalidTokenError, TokenCodec
from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_link_sender import ResetLinkSender
from src.domain.base import AuthContext
from src.domain.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# auto_error is off so a missing header answers with our own 401 body
security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_config(request: Request):
    return request.app.state.config


def get_token_codec(request: Request) -> TokenCodec:
    return request.app.state.token_codec


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_reset_link_sender(request: Request) -> Optional[ResetLinkSender]:
    return request.app.state.reset_link_sender


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_codec: TokenCodec = Depends(get_token_codec),
) -> AuthContext:
    """
    Request gate: extract and verify the Bearer token.

    Args:
        credentials: Bearer token from Authorization header, if any

    Returns:
        AuthContext with the caller's user id and email

    Raises:
        ClientError: 401 "No token" if the header is missing or not Bearer,
            401 "Invalid token" if verification fails
    """
    if credentials is None or not credentials.credentials:
        raise ClientError(
            Error("NO_TOKEN", "No token"), status_code=status.HTTP_401_UNAUTHORIZED
        )

    try:
        return token_codec.verify(credentials.credentials)
    except InvalidTokenError:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid token"), status_code=status.HTTP_401_UNAUTHORIZED
        )
