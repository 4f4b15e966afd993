"""
Rhythm90 Backend — Admin Route Handlers
========================================

What:  Team membership management (/admin/team*) and the platform-wide
       team listing (/admin/teams).
Who:   Called by the Admin and AdminDashboard pages.

Access:
    /admin/teams is admin-only (401 plain-text "Unauthorized" otherwise).
    The /admin/team membership routes carry no role check, matching the
    current frontend which gates them in the UI.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from rhythm90.config import settings
from rhythm90.schemas.account import MemberAdd, MemberRemove, TeamsResponse
from rhythm90.schemas.board import SuccessResponse
from rhythm90.services.demo_service import skip_response
from rhythm90.services.team_service import team_service
from rhythm90.services.user_service import user_service
from rhythm90.store import Store, get_store

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/team", summary="Members of the admin team")
async def list_members(store: Store = Depends(get_store)) -> List[Dict[str, Any]]:
    return await team_service.list_members(store, settings.admin_team_id)


@router.post(
    "/team/add",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    summary="Add a member to the admin team",
)
async def add_member(
    body: MemberAdd,
    store: Store = Depends(get_store),
) -> SuccessResponse:
    skipped = skip_response()
    if skipped is not None:
        return skipped
    await team_service.add_member(store, settings.admin_team_id, body.user_id, body.role)
    return SuccessResponse()


@router.post(
    "/team/remove",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    summary="Remove a member from the admin team",
)
async def remove_member(
    body: MemberRemove,
    store: Store = Depends(get_store),
) -> SuccessResponse:
    skipped = skip_response()
    if skipped is not None:
        return skipped
    await team_service.remove_member(store, settings.admin_team_id, body.user_id)
    return SuccessResponse()


@router.get("/teams", response_model=TeamsResponse, summary="All teams (admins only)")
async def list_teams(store: Store = Depends(get_store)) -> TeamsResponse:
    await user_service.ensure_admin(store, settings.current_user_id)
    return TeamsResponse(**await team_service.list_teams(store))
