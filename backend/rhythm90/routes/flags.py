"""
Rhythm90 Backend — Feature Flag Routes
=======================================

What:  GET /feature-flags returns {key: enabled}; POST toggles one flag
       (admins only).
"""

from typing import Dict

from fastapi import APIRouter, Depends

from rhythm90.config import settings
from rhythm90.schemas.account import FlagUpdate
from rhythm90.schemas.board import SuccessResponse
from rhythm90.services.flag_service import flag_service
from rhythm90.services.user_service import user_service
from rhythm90.store import Store, get_store

router = APIRouter(tags=["Feature Flags"])


@router.get("/feature-flags", summary="All feature flags")
async def list_flags(store: Store = Depends(get_store)) -> Dict[str, bool]:
    return await flag_service.list_flags(store)


@router.post(
    "/feature-flags",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    summary="Toggle a feature flag (admins only)",
)
async def set_flag(
    body: FlagUpdate,
    store: Store = Depends(get_store),
) -> SuccessResponse:
    await user_service.ensure_admin(store, settings.current_user_id)
    await flag_service.set_flag(store, body.key, body.enabled)
    return SuccessResponse()
