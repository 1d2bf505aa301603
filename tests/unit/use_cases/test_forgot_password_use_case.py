"""
Unit tests for ForgotPasswordUseCase

Covers both response modes and the no-enumeration rule.
"""
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from src.app.use_cases.auth import ForgotPasswordUseCase
from src.app.use_cases.auth.forgot_password_use_case import (
    GENERIC_MESSAGE,
    TESTING_HINT,
    TESTING_MESSAGE,
)
from src.domain.base import utcnow
from src.domain.entities import PasswordResetToken, User


@pytest.fixture
def user():
    return User(id=5, email="a@x.com", password_hash="hash")


@pytest.fixture
def captured_tokens(mock_uow):
    tokens = []

    async def capture(token: PasswordResetToken):
        token.id = len(tokens) + 1
        tokens.append(token)
        return token

    mock_uow.password_reset_tokens.create.side_effect = capture
    return tokens


@pytest.mark.asyncio
async def test_unknown_email_returns_generic_message(mock_uow, captured_tokens):
    """Test no token is created and nothing reveals the email is unknown"""
    mock_uow.users.get_by_email.return_value = None
    use_case = ForgotPasswordUseCase(mock_uow, frontend_url="https://fe.example.com")

    result = await use_case.execute("nobody@x.com")

    assert result.is_ok()
    assert result.value.model_dump(exclude_none=True) == {"message": GENERIC_MESSAGE}
    assert captured_tokens == []
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_known_email_with_frontend_url_is_silent(mock_uow, user, captured_tokens):
    """Test silent mode answers exactly like the unknown-email case"""
    mock_uow.users.get_by_email.return_value = user
    use_case = ForgotPasswordUseCase(mock_uow, frontend_url="https://fe.example.com/")

    result = await use_case.execute("a@x.com")

    assert result.is_ok()
    assert result.value.model_dump(exclude_none=True) == {"message": GENERIC_MESSAGE}
    assert len(captured_tokens) == 1
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_known_email_without_frontend_url_echoes_token(mock_uow, user, captured_tokens):
    """Test testing mode returns the stored token and a hint"""
    mock_uow.users.get_by_email.return_value = user
    use_case = ForgotPasswordUseCase(mock_uow)

    result = await use_case.execute("a@x.com")

    assert result.is_ok()
    response = result.value
    assert response.message == TESTING_MESSAGE
    assert response.hint == TESTING_HINT
    assert response.token == captured_tokens[0].token


@pytest.mark.asyncio
async def test_token_is_random_hex_and_unused(mock_uow, user, captured_tokens):
    """Test token shape and initial state"""
    mock_uow.users.get_by_email.return_value = user
    use_case = ForgotPasswordUseCase(mock_uow)

    await use_case.execute("a@x.com")
    await use_case.execute("a@x.com")

    first, second = captured_tokens
    assert len(first.token) == 64
    int(first.token, 16)
    assert first.token != second.token
    assert first.used is False
    assert first.user_id == 5
    assert first.expires_at is None


@pytest.mark.asyncio
async def test_token_ttl_sets_expiry(mock_uow, user, captured_tokens):
    """Test configured TTL is applied to new tokens"""
    mock_uow.users.get_by_email.return_value = user
    use_case = ForgotPasswordUseCase(mock_uow, token_ttl=timedelta(minutes=30))

    before = utcnow()
    await use_case.execute("a@x.com")

    expires_at = captured_tokens[0].expires_at
    assert expires_at is not None
    assert before + timedelta(minutes=29) < expires_at <= utcnow() + timedelta(minutes=30)


def test_build_reset_link_trims_trailing_slash(mock_uow):
    use_case = ForgotPasswordUseCase(mock_uow, frontend_url="https://fe.example.com/")

    assert (
        use_case.build_reset_link("abc")
        == "https://fe.example.com/reset-password?token=abc"
    )
    assert ForgotPasswordUseCase(mock_uow).build_reset_link("abc") is None


@pytest.mark.asyncio
async def test_link_sender_receives_reset_link(mock_uow, user, captured_tokens):
    """Test the composed link is handed to the sender, not the caller"""
    # Arrange
    mock_uow.users.get_by_email.return_value = user
    sender = AsyncMock()
    use_case = ForgotPasswordUseCase(
        mock_uow, frontend_url="https://fe.example.com/", link_sender=sender
    )

    # Act
    result = await use_case.execute("a@x.com")

    # Assert
    assert result.value.model_dump(exclude_none=True) == {"message": GENERIC_MESSAGE}
    token = captured_tokens[0].token
    sender.send.assert_awaited_once_with(
        "a@x.com", f"https://fe.example.com/reset-password?token={token}"
    )


@pytest.mark.asyncio
async def test_link_sender_unused_in_testing_mode_and_for_unknown_email(mock_uow, user):
    """Test nothing is delivered without a front-end URL or a matching user"""
    sender = AsyncMock()

    mock_uow.users.get_by_email.return_value = user
    await ForgotPasswordUseCase(mock_uow, link_sender=sender).execute("a@x.com")

    mock_uow.users.get_by_email.return_value = None
    await ForgotPasswordUseCase(
        mock_uow, frontend_url="https://fe.example.com", link_sender=sender
    ).execute("nobody@x.com")

    sender.send.assert_not_called()
