"""
Rhythm90 Backend — Current User Routes
=======================================

What:  GET/POST /me (profile read and rename), GET /admin/check and
       GET /premium-content.
Who:   Called by the UserSettings page and the admin navigation guard.
"""

from fastapi import APIRouter, Depends

from rhythm90.config import settings
from rhythm90.schemas.account import (
    AdminCheckResponse,
    NameUpdate,
    PremiumContentResponse,
    UserOut,
)
from rhythm90.schemas.board import ErrorResponse, SuccessResponse
from rhythm90.services.user_service import user_service
from rhythm90.store import Store, get_store

router = APIRouter(tags=["Users"])


@router.get(
    "/me",
    response_model=UserOut,
    responses={404: {"description": "Current user not found", "model": ErrorResponse}},
    summary="Current user's profile",
)
async def get_me(store: Store = Depends(get_store)) -> UserOut:
    return await user_service.get_profile(store, settings.current_user_id)


@router.post(
    "/me",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    responses={400: {"description": "Name failed validation", "model": ErrorResponse}},
    summary="Rename the current user",
)
async def update_me(
    body: NameUpdate,
    store: Store = Depends(get_store),
) -> SuccessResponse:
    await user_service.update_name(store, settings.current_user_id, body.name)
    return SuccessResponse()


@router.get("/admin/check", response_model=AdminCheckResponse, summary="Is the current user an admin?")
async def admin_check(store: Store = Depends(get_store)) -> AdminCheckResponse:
    return AdminCheckResponse(isAdmin=await user_service.is_admin(store, settings.current_user_id))


@router.get(
    "/premium-content",
    response_model=PremiumContentResponse,
    responses={403: {"description": "Premium subscription required", "model": ErrorResponse}},
    summary="Premium feature content (premium users only)",
)
async def premium_content(store: Store = Depends(get_store)) -> PremiumContentResponse:
    content = await user_service.premium_content(store, settings.current_user_id)
    return PremiumContentResponse(content=content)
