"""
Rhythm90 Backend — Board, Signal and Summary Schemas
=====================================================

What:  Pydantic models for the core team-board routes.
Why:   Typed request bodies replace free-form JSON parsing: a body that is
       not JSON, or that lacks a required field, is rejected by FastAPI as a
       422 before any statement runs. Nothing beyond shape is checked here
       (no length limits, no existence checks).
How:   FastAPI validates request bodies against these models and serializes
       responses through them.

Raw result sets:
    GET /board and GET /signals return store rows as-is, so they have no
    response model here. Adding a column to the table adds it to the
    response without a schema change.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Bodies
# ══════════════════════════════════════════════════════════════════════════


class PlayCreate(BaseModel):
    """
    Body of POST /board.

    signals and status are optional; the board service substitutes "" and
    "active" when they are absent or empty.
    """
    team_id: str = Field(description="Team that owns the play")
    name: str = Field(description="Short play name shown on the board")
    target_outcome: str = Field(description="What success looks like")
    why_this_play: str = Field(description="Reasoning behind running the play")
    how_to_run: str = Field(description="Execution notes")
    signals: Optional[str] = Field(default=None, description="Free-text signal notes")
    status: Optional[str] = Field(default=None, description="Lifecycle state, default 'active'")


class SignalCreate(BaseModel):
    """Body of POST /signals. play_id is stored as given; no existence check."""
    play_id: str = Field(description="Play the observation belongs to")
    observation: str = Field(description="What was observed")
    meaning: str = Field(description="How the team interprets it")
    action: str = Field(description="What the team will do about it")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class SuccessResponse(BaseModel):
    """
    Acknowledgement returned by mutating routes.

    Serialized with exclude_none, so a normal write renders exactly
    {"success": true}; a write skipped in demo mode adds demo and message.
    """
    success: bool = True
    demo: Optional[bool] = None
    message: Optional[str] = None


class SummaryRow(BaseModel):
    name: str = Field(description="Play name")
    observation: str
    meaning: str
    action: str


class SummaryResponse(BaseModel):
    """GET /rnr-summary: one row per (play, signal) pair on the board team."""
    summary: List[SummaryRow] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Fixed liveness payload. No dependency probing; always {"status": "ok"}."""
    status: str = "ok"


class ErrorResponse(BaseModel):
    """
    Standardized error body for application errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error")
        message: Human-readable description
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
