"""
Rhythm90 Backend — Notification Routes
=======================================

What:  GET /notifications?since=<epoch ms> for the navbar poller, and
       POST /create-sample-notifications for seeding a fresh environment.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from rhythm90.schemas.board import SuccessResponse
from rhythm90.services.notification_service import notification_service, parse_since
from rhythm90.store import Store, get_store

router = APIRouter(tags=["Notifications"])


@router.get("/notifications", summary="Notifications newer than `since`")
async def list_notifications(
    since: Optional[str] = Query(
        default=None,
        description="Epoch milliseconds of the last poll; defaults to five minutes ago",
    ),
    store: Store = Depends(get_store),
) -> List[Dict[str, Any]]:
    return await notification_service.list_since(store, parse_since(since))


@router.post(
    "/create-sample-notifications",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    summary="Insert sample notifications",
)
async def create_sample_notifications(store: Store = Depends(get_store)) -> SuccessResponse:
    await notification_service.create_samples(store)
    return SuccessResponse(message="Sample notifications created.")
