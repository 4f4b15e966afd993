"""
Rhythm90 Backend — AI Assistant Routes
=======================================

What:  POST /ai-signal and POST /ai-hypothesis.
Who:   Called by the frontend useAiSignal / useAiHypothesis hooks.

Errors:
    Provider failure → LLMServiceError → 503 via the global handler.
"""

from fastapi import APIRouter

from rhythm90.schemas.account import (
    HypothesisRequest,
    HypothesisResponse,
    SignalSuggestionRequest,
    SignalSuggestionResponse,
)
from rhythm90.schemas.board import ErrorResponse
from rhythm90.services.assistant_service import assistant_service

router = APIRouter(tags=["AI Assistant"])


@router.post(
    "/ai-signal",
    response_model=SignalSuggestionResponse,
    responses={503: {"description": "AI provider unavailable", "model": ErrorResponse}},
    summary="Recommendation for a signal observation",
)
async def ai_signal(body: SignalSuggestionRequest) -> SignalSuggestionResponse:
    suggestion = await assistant_service.suggest_for_signal(body.observation)
    return SignalSuggestionResponse(suggestion=suggestion)


@router.post(
    "/ai-hypothesis",
    response_model=HypothesisResponse,
    responses={503: {"description": "AI provider unavailable", "model": ErrorResponse}},
    summary="Business hypothesis for a play",
)
async def ai_hypothesis(body: HypothesisRequest) -> HypothesisResponse:
    hypothesis = await assistant_service.hypothesis_for_play(body.play_name)
    return HypothesisResponse(hypothesis=hypothesis)
