"""
Rhythm90 Backend — Invite Routes
=================================

What:  POST /invite (admins only) issues a link; GET/POST /accept-invite
       checks and redeems it.
Who:   Called by the Invite and AcceptInvite pages.

Redemption failures are reported in the body ({"valid": false} or
{"success": false}) with status 200, because the AcceptInvite page renders
them as a normal state rather than an error.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from rhythm90.config import settings
from rhythm90.schemas.account import (
    InviteAccept,
    InviteAcceptResponse,
    InviteCheckResponse,
    InviteCreate,
    InviteResponse,
)
from rhythm90.services.invite_service import invite_service
from rhythm90.services.user_service import user_service
from rhythm90.store import Store, get_store

router = APIRouter(tags=["Invites"])


@router.post("/invite", response_model=InviteResponse, summary="Invite someone to the team")
async def create_invite(
    body: InviteCreate,
    store: Store = Depends(get_store),
) -> InviteResponse:
    await user_service.ensure_admin(store, settings.current_user_id)
    link = await invite_service.create_invite(store, body.email)
    return InviteResponse(inviteLink=link)


@router.get(
    "/accept-invite",
    response_model=InviteCheckResponse,
    response_model_exclude_none=True,
    summary="Check an invite token",
)
async def check_invite(
    token: Optional[str] = Query(default=None, description="Token from the invite link"),
    store: Store = Depends(get_store),
) -> InviteCheckResponse:
    return await invite_service.check_invite(store, token)


@router.post(
    "/accept-invite",
    response_model=InviteAcceptResponse,
    response_model_exclude_none=True,
    summary="Redeem an invite token",
)
async def accept_invite(
    body: InviteAccept,
    store: Store = Depends(get_store),
) -> InviteAcceptResponse:
    return await invite_service.accept_invite(store, body.token, body.name)
