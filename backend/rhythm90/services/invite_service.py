"""
Rhythm90 Backend — Invite Service
==================================

What:  Issues team invitations and redeems them.
Why:   Admins grow the team by sharing a one-time link instead of creating
       accounts by hand.
How:   Each invite stores a random token. The link embeds it; redeeming a
       pending token creates a member user, adds them to the admin team and
       marks the invite accepted so the link cannot be used twice.
Who:   Called by rhythm90.routes.invites.

Flow:
    POST /invite          → token stored, link returned (and logged, since
                            no mailer is wired up)
    GET  /accept-invite   → is this token still pending? for which email?
    POST /accept-invite   → create user + membership, mark accepted
"""

import logging
from typing import Optional

from sqlalchemy import insert, select, update

from rhythm90.config import settings
from rhythm90.models import Invite, User, new_id
from rhythm90.schemas.account import InviteAcceptResponse, InviteCheckResponse
from rhythm90.services.team_service import team_service
from rhythm90.store import Row, Store

logger = logging.getLogger(__name__)

INVALID_INVITE_MESSAGE = "Invalid or expired invitation link"
DEFAULT_INVITEE_NAME = "New User"


class InviteService:

    async def create_invite(self, store: Store, email: str) -> str:
        """
        Store a fresh invite for email.

        Returns:
            The accept link: {APP_URL}/accept-invite?token=<token>
        """
        token = new_id()
        await store.run(insert(Invite).values(id=new_id(), email=email, token=token))
        link = f"{settings.app_url}/accept-invite?token={token}"
        logger.info("Invite link for %s: %s", email, link)
        return link

    async def _pending(self, store: Store, token: str) -> Optional[Row]:
        return await store.first(
            select(Invite.__table__).where(Invite.token == token, Invite.accepted.is_(False))
        )

    async def check_invite(self, store: Store, token: Optional[str]) -> InviteCheckResponse:
        if not token:
            return InviteCheckResponse(valid=False, message="No token provided")
        invite = await self._pending(store, token)
        if invite is None:
            return InviteCheckResponse(valid=False, message=INVALID_INVITE_MESSAGE)
        return InviteCheckResponse(valid=True, email=invite["email"])

    async def accept_invite(
        self, store: Store, token: str, name: Optional[str]
    ) -> InviteAcceptResponse:
        """
        Redeem a pending invite.

        Writes, in order: the new user, their admin-team membership, and the
        accepted flag. All three share the request's transaction, so a failure
        in any of them rolls back the others.
        """
        invite = await self._pending(store, token)
        if invite is None:
            return InviteAcceptResponse(success=False, message=INVALID_INVITE_MESSAGE)

        user_id = new_id()
        await store.run(
            insert(User).values(
                id=user_id,
                email=invite["email"],
                name=name or DEFAULT_INVITEE_NAME,
                provider="invite",
                role="member",
                is_premium=False,
            )
        )
        await team_service.add_member(store, settings.admin_team_id, user_id, "member")
        await store.run(update(Invite).where(Invite.token == token).values(accepted=True))

        logger.info("Invite for %s accepted; user %s created", invite["email"], user_id)
        return InviteAcceptResponse(success=True, email=invite["email"])


# ── Singleton Instance ────────────────────────────────────────────────────
invite_service = InviteService()
