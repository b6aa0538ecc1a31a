"""
Integration tests for POST /auth/reset-password/{reset_token}

Covers the full lifecycle: issue through the API, follow the emailed
token, and check single use and the strict expiry boundary.
"""
from datetime import timedelta

import bcrypt
import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.domain.entities import AuditEvent, PasswordResetToken
from tests.fixtures.json_loader import TestDataLoader
from tests.integration.helpers.accounts import create_merchant, create_user

NEW_PASSWORD = TestDataLoader.get("new_password")
INVALID_TOKEN_ERROR = {
    "code": "INVALID_TOKEN",
    "message": "Invalid or expired password reset token",
}


async def issue_token(client: AsyncClient, notifier, email: str) -> str:
    response = await client.post("/auth/forgot-password", json={"email": email})
    assert response.status_code == 200
    return notifier.last_token


async def count_tokens(db_session: AsyncSession) -> int:
    result = await db_session.exec(select(PasswordResetToken))
    return len(result.all())


@pytest.mark.asyncio
async def test_successful_password_reset(
    client: AsyncClient, db_session: AsyncSession, clock, notifier
):
    """Valid token updates the password and is removed"""
    user = await create_user(db_session)
    token = await issue_token(client, notifier, user.email)

    response = await client.post(f"/auth/reset-password/{token}", json={"password": NEW_PASSWORD})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "success"
    assert "message" in data

    await db_session.refresh(user)
    assert bcrypt.checkpw(NEW_PASSWORD.encode(), user.password_hash.encode())
    assert user.password_changed_at == clock.now
    assert await count_tokens(db_session) == 0

    result = await db_session.exec(select(AuditEvent).where(AuditEvent.principal_id == user.id))
    actions = sorted(e.action for e in result.all())
    assert actions == ["password_reset_completed", "password_reset_requested"]


@pytest.mark.asyncio
async def test_successful_merchant_password_reset(
    client: AsyncClient, db_session: AsyncSession, notifier
):
    merchant = await create_merchant(db_session)
    token = await issue_token(client, notifier, merchant.email)

    response = await client.post(f"/auth/reset-password/{token}", json={"password": NEW_PASSWORD})

    assert response.status_code == 200
    await db_session.refresh(merchant)
    assert bcrypt.checkpw(NEW_PASSWORD.encode(), merchant.password_hash.encode())


@pytest.mark.asyncio
async def test_token_works_only_once(
    client: AsyncClient, db_session: AsyncSession, notifier
):
    user = await create_user(db_session)
    token = await issue_token(client, notifier, user.email)

    first = await client.post(f"/auth/reset-password/{token}", json={"password": NEW_PASSWORD})
    second = await client.post(
        f"/auth/reset-password/{token}", json={"password": "AnotherPass456!"}
    )

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json()["error"] == INVALID_TOKEN_ERROR

    await db_session.refresh(user)
    assert bcrypt.checkpw(NEW_PASSWORD.encode(), user.password_hash.encode())


@pytest.mark.asyncio
async def test_reset_just_before_expiry_succeeds(
    client: AsyncClient, db_session: AsyncSession, clock, notifier
):
    """Issued at t=0, used at t=9m59s"""
    user = await create_user(db_session)
    token = await issue_token(client, notifier, user.email)

    clock.advance(timedelta(minutes=9, seconds=59))
    response = await client.post(f"/auth/reset-password/{token}", json={"password": NEW_PASSWORD})

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_reset_exactly_at_expiry_fails(
    client: AsyncClient, db_session: AsyncSession, clock, notifier
):
    """Issued at t=0, used at t=10m00s: expiry is exclusive"""
    user = await create_user(db_session)
    old_hash = user.password_hash
    token = await issue_token(client, notifier, user.email)

    clock.advance(timedelta(minutes=10))
    response = await client.post(f"/auth/reset-password/{token}", json={"password": NEW_PASSWORD})

    assert response.status_code == 400
    assert response.json()["error"] == INVALID_TOKEN_ERROR
    await db_session.refresh(user)
    assert user.password_hash == old_hash


@pytest.mark.asyncio
async def test_mismatched_token_indistinguishable_from_expired(
    client: AsyncClient, db_session: AsyncSession, clock, notifier
):
    user = await create_user(db_session)
    token = await issue_token(client, notifier, user.email)

    mismatched = await client.post(
        "/auth/reset-password/not-the-issued-token", json={"password": NEW_PASSWORD}
    )
    clock.advance(timedelta(minutes=11))
    expired = await client.post(f"/auth/reset-password/{token}", json={"password": NEW_PASSWORD})

    assert mismatched.status_code == expired.status_code == 400
    assert mismatched.json() == expired.json()


@pytest.mark.asyncio
async def test_new_token_invalidates_previous_one(
    client: AsyncClient, db_session: AsyncSession, clock, notifier
):
    user = await create_user(db_session)
    first_token = await issue_token(client, notifier, user.email)
    clock.advance(timedelta(minutes=2))
    second_token = await issue_token(client, notifier, user.email)
    assert first_token != second_token

    stale = await client.post(
        f"/auth/reset-password/{first_token}", json={"password": NEW_PASSWORD}
    )
    fresh = await client.post(
        f"/auth/reset-password/{second_token}", json={"password": NEW_PASSWORD}
    )

    assert stale.status_code == 400
    assert fresh.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize("weak_password", TestDataLoader.get("weak_passwords"))
async def test_weak_password_keeps_token_usable(
    client: AsyncClient, db_session: AsyncSession, notifier, weak_password
):
    """Policy failures are reported before the token is consumed"""
    user = await create_user(db_session)
    token = await issue_token(client, notifier, user.email)

    rejected = await client.post(f"/auth/reset-password/{token}", json={"password": weak_password})

    assert rejected.status_code == 400
    assert rejected.json()["error"]["code"] == "INVALID_PASSWORD"
    assert await count_tokens(db_session) == 1

    accepted = await client.post(f"/auth/reset-password/{token}", json={"password": NEW_PASSWORD})
    assert accepted.status_code == 200


@pytest.mark.asyncio
async def test_reset_password_missing_body(client: AsyncClient):
    response = await client.post("/auth/reset-password/some-token", json={})

    assert response.status_code == 422
