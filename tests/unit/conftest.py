import pytest
from unittest.mock import AsyncMock, MagicMock

from src.api.utils.jwt import TokenCodec
from src.app.services.password_hasher import PasswordHasher


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.create = AsyncMock()
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.password_reset_tokens = MagicMock()
    uow.password_reset_tokens.create = AsyncMock(side_effect=lambda token: token)
    uow.password_reset_tokens.get_by_token = AsyncMock()
    uow.password_reset_tokens.mark_used = AsyncMock(return_value=True)

    uow.listings = MagicMock()
    uow.listings.search_published = AsyncMock(return_value=[])
    uow.listings.get_by_id = AsyncMock()
    uow.listings.create = AsyncMock()
    uow.listings.update = AsyncMock(side_effect=lambda listing: listing)
    uow.listings.delete = AsyncMock()
    return uow


@pytest.fixture
def hasher():
    # Lowest bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_codec():
    return TokenCodec("unit-test-secret")
