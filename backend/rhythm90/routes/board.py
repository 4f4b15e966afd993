"""
Rhythm90 Backend — Board Route Handlers
========================================

What:  The team board: plays (/board), the signal log (/signals), and the
       results-and-review summary (/rnr-summary).
How:   Each handler picks one BoardService operation and returns its result.
Who:   Called by the frontend Board, SignalLog and RnRSummary views.

Scoping:
    GET routes read the configured team/play (settings.board_team_id,
    settings.signals_play_id). They accept no team or play parameter; a
    query string is ignored.

Errors:
    A body that is not JSON or misses a required field → 422 (FastAPI).
    A store failure → 500 via the catch-all handler. Nothing else is checked.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from rhythm90.config import settings
from rhythm90.schemas.board import PlayCreate, SignalCreate, SuccessResponse, SummaryResponse
from rhythm90.services.demo_service import skip_response
from rhythm90.services.board_service import board_service
from rhythm90.store import Store, get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Board"])


@router.get(
    "/board",
    summary="List the board team's plays",
    description="Every play row for the configured board team, unpaginated.",
)
async def list_plays(store: Store = Depends(get_store)) -> List[Dict[str, Any]]:
    return await board_service.list_plays(store, settings.board_team_id)


@router.post(
    "/board",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    summary="Create a play",
)
async def create_play(
    body: PlayCreate,
    store: Store = Depends(get_store),
) -> SuccessResponse:
    """
    Insert one play. status defaults to "active" and signals to "".

    The acknowledgement does not include the new play or its id.
    """
    skipped = skip_response()
    if skipped is not None:
        return skipped
    await board_service.create_play(store, body)
    return SuccessResponse()


@router.get(
    "/signals",
    summary="List signals for the configured play",
)
async def list_signals(store: Store = Depends(get_store)) -> List[Dict[str, Any]]:
    return await board_service.list_signals(store, settings.signals_play_id)


@router.post(
    "/signals",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    summary="Log a signal against a play",
)
async def create_signal(
    body: SignalCreate,
    store: Store = Depends(get_store),
) -> SuccessResponse:
    skipped = skip_response()
    if skipped is not None:
        return skipped
    await board_service.create_signal(store, body)
    return SuccessResponse()


@router.get(
    "/rnr-summary",
    response_model=SummaryResponse,
    summary="Results-and-review summary",
    description="Play names joined with their signals for the board team.",
)
async def rnr_summary(store: Store = Depends(get_store)) -> SummaryResponse:
    return await board_service.rnr_summary(store, settings.board_team_id)
