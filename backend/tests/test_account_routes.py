"""
Rhythm90 Backend — Account, Admin and Invite Route Tests
=========================================================

What:  HTTP-level tests for sign-in stubs, /me, the admin routes, feature
       flags and the invite flow.

What we test:
    ✅ Provider sign-in upserts a fixed user and echoes the body
    ✅ Profile read (404 when missing) and rename rules (400)
    ✅ Admin-only routes answer plain-text 401 for non-admins
    ✅ Membership add/remove on the configured admin team
    ✅ Invite link → check → accept → link no longer valid
"""

import pytest
from sqlalchemy import select

from rhythm90.config import settings
from rhythm90.models import FeatureFlag, Invite, Team, TeamUser, User


@pytest.fixture
def admin_user():
    return User(
        id=settings.current_user_id,
        email="admin@rhythm90.io",
        name="Admin",
        provider="google",
        role="admin",
    )


@pytest.fixture
def member_user():
    return User(id=settings.current_user_id, email="member@rhythm90.io", name="Member")


class TestProviderSignIn:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("provider,user_id", [("google", "user-123"), ("microsoft", "user-456")])
    async def test_sign_in_creates_fixed_user(self, test_client, fetch, provider, user_id):
        body = {"email": "pat@example.com", "name": "Pat"}
        response = await test_client.post(f"/auth/{provider}", json=body)

        assert response.status_code == 200
        payload = response.json()
        assert payload["success"] is True
        assert payload["user"]["id"] == user_id
        assert payload["user"]["email"] == "pat@example.com"
        assert payload["user"]["provider"] == provider

        rows = await fetch(select(User.id, User.role))
        assert rows == [{"id": user_id, "role": "member"}]

    @pytest.mark.asyncio
    async def test_repeat_sign_in_keeps_first_row(self, test_client, fetch):
        await test_client.post("/auth/google", json={"email": "a@example.com", "name": "A"})
        await test_client.post("/auth/google", json={"email": "b@example.com", "name": "B"})

        rows = await fetch(select(User.email))
        assert rows == [{"email": "a@example.com"}]


class TestCurrentUser:

    @pytest.mark.asyncio
    async def test_get_me(self, test_client, seed, member_user):
        await seed(member_user)

        response = await test_client.get("/me")
        assert response.status_code == 200
        assert response.json()["email"] == "member@rhythm90.io"
        assert response.json()["is_premium"] is False

    @pytest.mark.asyncio
    async def test_get_me_missing_user_is_404(self, test_client):
        response = await test_client.get("/me")
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_rename(self, test_client, seed, fetch, member_user):
        await seed(member_user)

        response = await test_client.post("/me", json={"name": "Jo Smith-Jones"})
        assert response.json() == {"success": True}
        assert await fetch(select(User.name)) == [{"name": "Jo Smith-Jones"}]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name,message", [
        ("J", "Name must be between 2 and 50 characters"),
        ("x" * 51, "Name must be between 2 and 50 characters"),
        ("Robert'); --", "Name contains invalid characters"),
    ])
    async def test_rename_rejects_bad_names(self, test_client, seed, fetch, member_user, name, message):
        await seed(member_user)

        response = await test_client.post("/me", json={"name": name})
        assert response.status_code == 400
        assert response.json()["message"] == message
        assert response.json()["details"] == {"field": "name"}
        assert await fetch(select(User.name)) == [{"name": "Member"}]

    @pytest.mark.asyncio
    async def test_admin_check(self, test_client, seed, admin_user):
        assert (await test_client.get("/admin/check")).json() == {"isAdmin": False}

        await seed(admin_user)
        assert (await test_client.get("/admin/check")).json() == {"isAdmin": True}


class TestAdminTeam:

    @pytest.mark.asyncio
    async def test_add_list_remove_member(self, test_client):
        response = await test_client.post("/admin/team/add", json={"user_id": "u1", "role": "member"})
        assert response.json() == {"success": True}

        members = (await test_client.get("/admin/team")).json()
        assert members == [{"team_id": settings.admin_team_id, "user_id": "u1", "role": "member"}]

        await test_client.post("/admin/team/remove", json={"user_id": "u1"})
        assert (await test_client.get("/admin/team")).json() == []

    @pytest.mark.asyncio
    async def test_remove_non_member_is_noop(self, test_client):
        response = await test_client.post("/admin/team/remove", json={"user_id": "ghost"})
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_list_teams_requires_admin(self, test_client, seed, member_user):
        await seed(member_user)

        response = await test_client.get("/admin/teams")
        assert response.status_code == 401
        assert response.text == "Unauthorized"

    @pytest.mark.asyncio
    async def test_list_teams_for_admin(self, test_client, seed, admin_user):
        await seed(admin_user, Team(id="t1", name="One"), Team(id="t2", name="Two"))

        response = await test_client.get("/admin/teams")
        assert response.status_code == 200
        body = response.json()
        assert body["teamCount"] == 2
        assert {team["id"] for team in body["teams"]} == {"t1", "t2"}


class TestFeatureFlags:

    @pytest.mark.asyncio
    async def test_list_flags_as_map(self, test_client, seed):
        await seed(FeatureFlag(key="ai_assistant", enabled=True), FeatureFlag(key="beta", enabled=False))

        response = await test_client.get("/feature-flags")
        assert response.json() == {"ai_assistant": True, "beta": False}

    @pytest.mark.asyncio
    async def test_toggle_requires_admin(self, test_client, seed):
        await seed(FeatureFlag(key="beta", enabled=False))

        response = await test_client.post("/feature-flags", json={"key": "beta", "enabled": True})
        assert response.status_code == 401
        assert response.text == "Unauthorized"

    @pytest.mark.asyncio
    async def test_admin_toggles_flag(self, test_client, seed, admin_user):
        await seed(admin_user, FeatureFlag(key="beta", enabled=False))

        response = await test_client.post("/feature-flags", json={"key": "beta", "enabled": True})
        assert response.json() == {"success": True}
        assert (await test_client.get("/feature-flags")).json() == {"beta": True}


class TestInvites:

    @pytest.mark.asyncio
    async def test_invite_requires_admin(self, test_client):
        response = await test_client.post("/invite", json={"email": "new@example.com"})
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_full_invite_flow(self, test_client, seed, fetch, admin_user):
        await seed(admin_user)

        response = await test_client.post("/invite", json={"email": "new@example.com"})
        link = response.json()["inviteLink"]
        assert link.startswith(f"{settings.app_url}/accept-invite?token=")
        token = link.split("token=", 1)[1]

        check = await test_client.get("/accept-invite", params={"token": token})
        assert check.json() == {"valid": True, "email": "new@example.com"}

        accept = await test_client.post("/accept-invite", json={"token": token, "name": "Newbie"})
        assert accept.json() == {"success": True, "email": "new@example.com"}

        users = await fetch(select(User.id, User.name, User.provider).where(User.email == "new@example.com"))
        assert len(users) == 1
        assert users[0]["name"] == "Newbie"
        assert users[0]["provider"] == "invite"

        members = await fetch(select(TeamUser.__table__))
        assert members == [{"team_id": settings.admin_team_id, "user_id": users[0]["id"], "role": "member"}]

        # A redeemed token cannot be used again
        again = await test_client.get("/accept-invite", params={"token": token})
        assert again.json() == {"valid": False, "message": "Invalid or expired invitation link"}

    @pytest.mark.asyncio
    async def test_accept_defaults_name(self, test_client, seed, fetch):
        await seed(Invite(id="i1", email="x@example.com", token="tok"))

        await test_client.post("/accept-invite", json={"token": "tok"})
        assert await fetch(select(User.name)) == [{"name": "New User"}]

    @pytest.mark.asyncio
    async def test_check_without_token(self, test_client):
        response = await test_client.get("/accept-invite")
        assert response.json() == {"valid": False, "message": "No token provided"}

    @pytest.mark.asyncio
    async def test_accept_unknown_token(self, test_client):
        response = await test_client.post("/accept-invite", json={"token": "nope"})
        assert response.status_code == 200
        assert response.json() == {"success": False, "message": "Invalid or expired invitation link"}
