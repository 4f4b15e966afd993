"""
Rhythm90 Backend — Account, Admin and Growth Schemas
=====================================================

What:  Request bodies and response models for the routes around the board:
       sign-in stubs, the current user, admin team management, feature
       flags, invites, password reset, premium content, analytics, the
       waitlist, notifications and the AI assistant.

Field names mirror the JSON the frontend already sends and reads, which is
why a few responses use camelCase (isDemoMode, teamCount, inviteLink).
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# ── Users & Sign-in ───────────────────────────────────────────────────────


class ProviderLogin(BaseModel):
    email: str
    name: str


class UserOut(BaseModel):
    id: str
    email: str
    name: Optional[str] = None
    provider: Optional[str] = None
    role: str = "member"
    is_premium: bool = False


class LoginResponse(BaseModel):
    success: bool = True
    user: UserOut
    demo: Optional[bool] = None


class NameUpdate(BaseModel):
    """Body of POST /me. Length and character rules are checked by UserService."""
    name: str


class DemoCheckResponse(BaseModel):
    isDemoMode: bool


class AdminCheckResponse(BaseModel):
    isAdmin: bool


class PremiumContentResponse(BaseModel):
    success: bool = True
    content: Dict[str, Any]


# ── Password Reset ────────────────────────────────────────────────────────


class PasswordResetRequest(BaseModel):
    email: str


class PasswordReset(BaseModel):
    token: str
    password: str = Field(description="New password, stored hashed")


# ── Admin Team Management ─────────────────────────────────────────────────


class MemberAdd(BaseModel):
    user_id: str
    role: str


class MemberRemove(BaseModel):
    user_id: str


class TeamsResponse(BaseModel):
    teams: List[Dict[str, Any]]
    teamCount: int


# ── Feature Flags ─────────────────────────────────────────────────────────


class FlagUpdate(BaseModel):
    key: str
    enabled: bool


# ── Invites ───────────────────────────────────────────────────────────────


class InviteCreate(BaseModel):
    email: str


class InviteResponse(BaseModel):
    success: bool = True
    inviteLink: str


class InviteAccept(BaseModel):
    token: str
    name: Optional[str] = None


class InviteCheckResponse(BaseModel):
    """GET /accept-invite. email is set when valid, message when not."""
    valid: bool
    email: Optional[str] = None
    message: Optional[str] = None


class InviteAcceptResponse(BaseModel):
    success: bool
    email: Optional[str] = None
    message: Optional[str] = None


# ── Growth ────────────────────────────────────────────────────────────────


class AnalyticsEventCreate(BaseModel):
    event: str
    data: Optional[Dict[str, Any]] = None


class WaitlistJoin(BaseModel):
    email: str


class DashboardStats(BaseModel):
    playCount: int = 0
    signalCount: int = 0


# ── AI Assistant ──────────────────────────────────────────────────────────


class SignalSuggestionRequest(BaseModel):
    observation: str = Field(description="Observation to get a recommendation for")


class SignalSuggestionResponse(BaseModel):
    suggestion: str


class HypothesisRequest(BaseModel):
    play_name: str = Field(description="Play to generate a business hypothesis for")


class HypothesisResponse(BaseModel):
    hypothesis: str
