"""
Rhythm90 Backend — Password Reset and Premium Content Tests
============================================================

What:  HTTP-level tests for /request-password-reset, /reset-password and
       /premium-content.

What we test:
    ✅ Unknown and known emails get the same acknowledgement
    ✅ A token is issued per request and lives for 24 hours
    ✅ The sixth request within an hour is refused with a 429
    ✅ Redeeming a token stores a hash of the new password and consumes it
    ✅ Unknown and expired tokens are rejected; expired rows are purged
    ✅ Premium content is served only to premium users
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select

from rhythm90.config import settings
from rhythm90.models import PasswordResetToken, User
from rhythm90.services.password_service import (
    INVALID_TOKEN_MESSAGE,
    MAX_REQUESTS_PER_WINDOW,
    PASSWORD_UPDATED_MESSAGE,
    RESET_REQUESTED_MESSAGE,
    TOO_MANY_REQUESTS_MESSAGE,
    verify_password,
)

EMAIL = "member@rhythm90.io"


@pytest.fixture
def account():
    return User(id="user-reset", email=EMAIL, name="Member")


def _naive_utc(value: datetime) -> datetime:
    # SQLite hands datetimes back without tzinfo
    return value.astimezone(timezone.utc).replace(tzinfo=None) if value.tzinfo else value


class TestRequestPasswordReset:

    @pytest.mark.asyncio
    async def test_unknown_email_gets_generic_answer(self, test_client, fetch):
        response = await test_client.post(
            "/request-password-reset", json={"email": "nobody@example.com"}
        )
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": RESET_REQUESTED_MESSAGE}
        assert await fetch(select(PasswordResetToken.id)) == []

    @pytest.mark.asyncio
    async def test_known_email_issues_day_long_token(self, test_client, seed, fetch, account):
        await seed(account)

        before = datetime.now(timezone.utc)
        response = await test_client.post("/request-password-reset", json={"email": EMAIL})
        assert response.json() == {"success": True, "message": RESET_REQUESTED_MESSAGE}

        rows = await fetch(select(PasswordResetToken.user_id, PasswordResetToken.expires_at))
        assert len(rows) == 1
        assert rows[0]["user_id"] == "user-reset"
        lifetime = _naive_utc(rows[0]["expires_at"]) - _naive_utc(before)
        assert timedelta(hours=23, minutes=59) < lifetime <= timedelta(hours=24, minutes=1)

    @pytest.mark.asyncio
    async def test_limit_per_hour(self, test_client, seed, fetch, account):
        await seed(account)

        for _ in range(MAX_REQUESTS_PER_WINDOW):
            response = await test_client.post("/request-password-reset", json={"email": EMAIL})
            assert response.status_code == 200

        response = await test_client.post("/request-password-reset", json={"email": EMAIL})
        assert response.status_code == 429
        assert response.json()["error"] == "too_many_requests"
        assert response.json()["message"] == TOO_MANY_REQUESTS_MESSAGE
        assert len(await fetch(select(PasswordResetToken.id))) == MAX_REQUESTS_PER_WINDOW

    @pytest.mark.asyncio
    async def test_older_requests_do_not_count(self, test_client, seed, account):
        two_hours_ago = datetime.now(timezone.utc) - timedelta(hours=2)
        await seed(
            account,
            *[
                PasswordResetToken(
                    user_id="user-reset",
                    token=f"old-{i}",
                    expires_at=two_hours_ago + timedelta(hours=24),
                    created_at=two_hours_ago,
                )
                for i in range(MAX_REQUESTS_PER_WINDOW)
            ],
        )

        response = await test_client.post("/request-password-reset", json={"email": EMAIL})
        assert response.status_code == 200


class TestResetPassword:

    @pytest.mark.asyncio
    async def test_valid_token_sets_password_and_is_consumed(self, test_client, seed, fetch, account):
        await seed(
            account,
            PasswordResetToken(
                user_id="user-reset",
                token="tok-1",
                expires_at=datetime.now(timezone.utc) + timedelta(hours=1),
            ),
        )

        response = await test_client.post(
            "/reset-password", json={"token": "tok-1", "password": "n3w-secret"}
        )
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": PASSWORD_UPDATED_MESSAGE}

        [user] = await fetch(select(User.password_hash))
        assert user["password_hash"] != "n3w-secret"
        assert verify_password("n3w-secret", user["password_hash"])
        assert await fetch(select(PasswordResetToken.id)) == []

        again = await test_client.post(
            "/reset-password", json={"token": "tok-1", "password": "other"}
        )
        assert again.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_token_is_rejected(self, test_client):
        response = await test_client.post(
            "/reset-password", json={"token": "missing", "password": "whatever"}
        )
        assert response.status_code == 400
        assert response.json()["message"] == INVALID_TOKEN_MESSAGE
        assert response.json()["details"] == {"field": "token"}

    @pytest.mark.asyncio
    async def test_expired_token_is_rejected_and_purged(self, test_client, seed, fetch, account):
        await seed(
            account,
            PasswordResetToken(
                user_id="user-reset",
                token="stale",
                expires_at=datetime.now(timezone.utc) - timedelta(minutes=1),
            ),
        )

        response = await test_client.post(
            "/reset-password", json={"token": "stale", "password": "whatever"}
        )
        assert response.status_code == 400
        assert response.json()["message"] == INVALID_TOKEN_MESSAGE
        assert await fetch(select(PasswordResetToken.id)) == []
        assert await fetch(select(User.password_hash)) == [{"password_hash": None}]

    @pytest.mark.asyncio
    async def test_missing_fields_are_rejected(self, test_client):
        response = await test_client.post("/reset-password", json={"token": "tok-1"})
        assert response.status_code == 422


class TestPremiumContent:

    @pytest.mark.asyncio
    async def test_premium_user_gets_content(self, test_client, seed):
        await seed(User(id=settings.current_user_id, email=EMAIL, name="Member", is_premium=True))

        response = await test_client.get("/premium-content")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert set(body["content"]) == {"advancedAnalytics", "unlimitedPlays", "aiAssistant"}

    @pytest.mark.asyncio
    async def test_free_user_is_forbidden(self, test_client, seed):
        await seed(User(id=settings.current_user_id, email=EMAIL, name="Member"))

        response = await test_client.get("/premium-content")
        assert response.status_code == 403
        assert response.json()["error"] == "forbidden"
        assert response.json()["message"] == "Premium subscription required"

    @pytest.mark.asyncio
    async def test_missing_user_is_forbidden(self, test_client):
        response = await test_client.get("/premium-content")
        assert response.status_code == 403
