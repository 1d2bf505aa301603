from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.base import utcnow
from src.domain.entities import PasswordResetToken

INVALID = {"error": "Invalid or already used token"}


async def _issue_token(client: AsyncClient, email="a@x.com", password="p1p1p1"):
    await client.post("/auth/register", json={"email": email, "password": password})
    response = await client.post("/auth/forgot-password", json={"email": email})
    return response.json()["token"]


@pytest.mark.asyncio
async def test_reset_password_success(client: AsyncClient):
    """Password Reset

    Given I hold a fresh reset token
    When I post it with a new password
    Then the new password logs in and the old one no longer does
    """
    token = await _issue_token(client)

    response = await client.post("/auth/reset-password", json={
        "token": token,
        "newPassword": "p2p2p2"
    })

    assert response.status_code == 200
    assert response.json() == {"message": "Password updated successfully"}

    new_login = await client.post("/auth/login", json={"email": "a@x.com", "password": "p2p2p2"})
    old_login = await client.post("/auth/login", json={"email": "a@x.com", "password": "p1p1p1"})
    assert new_login.status_code == 200
    assert old_login.status_code == 401


@pytest.mark.asyncio
async def test_reset_token_is_single_use(client: AsyncClient):
    """Token Reuse

    Given a token was already used to set password p2
    When I try to use it again to set p3
    Then the request fails with 400 and the password stays p2
    """
    token = await _issue_token(client)
    first = await client.post("/auth/reset-password", json={
        "token": token,
        "newPassword": "p2p2p2"
    })
    assert first.status_code == 200

    second = await client.post("/auth/reset-password", json={
        "token": token,
        "newPassword": "p3p3p3"
    })

    assert second.status_code == 400
    assert second.json() == INVALID
    login = await client.post("/auth/login", json={"email": "a@x.com", "password": "p2p2p2"})
    assert login.status_code == 200


@pytest.mark.asyncio
async def test_failed_reuse_keeps_original_password(client: AsyncClient, db_session):
    """A used token never changes the password, even if it was used by a race winner"""
    token = await _issue_token(client)
    result = await db_session.exec(
        select(PasswordResetToken).where(PasswordResetToken.token == token)
    )
    stored = result.one()
    stored.used = True
    db_session.add(stored)
    await db_session.commit()

    response = await client.post("/auth/reset-password", json={
        "token": token,
        "newPassword": "p2p2p2"
    })

    assert response.status_code == 400
    login = await client.post("/auth/login", json={"email": "a@x.com", "password": "p1p1p1"})
    assert login.status_code == 200


@pytest.mark.asyncio
async def test_unknown_token(client: AsyncClient):
    response = await client.post("/auth/reset-password", json={
        "token": "f" * 64,
        "newPassword": "p2p2p2"
    })

    assert response.status_code == 400
    assert response.json() == INVALID


@pytest.mark.asyncio
async def test_expired_token(client: AsyncClient, db_session):
    token = await _issue_token(client)
    result = await db_session.exec(
        select(PasswordResetToken).where(PasswordResetToken.token == token)
    )
    stored = result.one()
    stored.expires_at = utcnow() - timedelta(minutes=5)
    db_session.add(stored)
    await db_session.commit()

    response = await client.post("/auth/reset-password", json={
        "token": token,
        "newPassword": "p2p2p2"
    })

    assert response.status_code == 400
    assert response.json() == INVALID


@pytest.mark.asyncio
async def test_reset_validation(client: AsyncClient):
    response = await client.post("/auth/reset-password", json={
        "token": "short",
        "newPassword": "12345"
    })

    assert response.status_code == 400
    data = response.json()
    assert data["message"] == "Validation failed"
    assert "token" in data["fieldErrors"]
    assert "newPassword" in data["fieldErrors"]
