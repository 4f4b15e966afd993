"""
Rhythm90 Backend — Growth Routes
=================================

What:  POST /analytics (experiment and usage events), POST /waitlist, and
       GET /dashboard-stats.
"""

from fastapi import APIRouter, Depends

from rhythm90.config import settings
from rhythm90.schemas.account import AnalyticsEventCreate, DashboardStats, WaitlistJoin
from rhythm90.schemas.board import ErrorResponse, SuccessResponse
from rhythm90.services.growth_service import growth_service
from rhythm90.store import Store, get_store

router = APIRouter(tags=["Growth"])


@router.post(
    "/analytics",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    summary="Record an analytics event",
)
async def record_event(
    body: AnalyticsEventCreate,
    store: Store = Depends(get_store),
) -> SuccessResponse:
    await growth_service.record_event(store, body.event, body.data)
    return SuccessResponse()


@router.post(
    "/waitlist",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    responses={400: {"description": "Invalid email format", "model": ErrorResponse}},
    summary="Join the waitlist",
)
async def join_waitlist(
    body: WaitlistJoin,
    store: Store = Depends(get_store),
) -> SuccessResponse:
    await growth_service.join_waitlist(store, body.email)
    return SuccessResponse()


@router.get("/dashboard-stats", response_model=DashboardStats, summary="Board team counters")
async def dashboard_stats(store: Store = Depends(get_store)) -> DashboardStats:
    return await growth_service.dashboard_stats(store, settings.board_team_id)
