"""
Rhythm90 Backend — Demo Mode Service
=====================================

What:  Everything DEMO_MODE switches on: the demo sign-in, sample data
       seeding, and the no-op response for mutating team routes.
Why:   Sales demos and the public sandbox share one database. Visitors must
       see a populated board, and must not be able to change it.
How:   Seeding uses insert-or-ignore with fixed ids, so signing in twice
       seeds nothing new. Mutating routes check `skip_response()` first
       and return it instead of writing.
"""

import logging
from typing import Optional

from rhythm90.config import settings
from rhythm90.exceptions import ForbiddenError
from rhythm90.models import Play, Signal, Team, User
from rhythm90.schemas.account import UserOut
from rhythm90.schemas.board import SuccessResponse
from rhythm90.store import Store

logger = logging.getLogger(__name__)

DEMO_TEAM_ID = "demo-team-123"
DEMO_TEAM_NAME = "Demo Team"
SKIPPED_MESSAGE = "Action skipped in demo mode"

DEMO_USER = UserOut(
    id="demo-user-123",
    email="demo@example.com",
    name="Demo User",
    provider="demo",
    role="member",
    is_premium=False,
)

DEMO_PLAYS = (
    {
        "id": "demo-play-1",
        "name": "Increase Engagement",
        "target_outcome": "Boost social media engagement by 25%",
        "why_this_play": "Engagement is dropping across all channels",
        "how_to_run": "Focus on interactive content and community building",
    },
    {
        "id": "demo-play-2",
        "name": "Boost Conversion",
        "target_outcome": "Improve conversion rate by 15%",
        "why_this_play": "Current conversion funnel has leaks",
        "how_to_run": "Optimize landing pages and reduce friction",
    },
)

DEMO_SIGNALS = (
    {
        "id": "demo-signal-1",
        "play_id": "demo-play-1",
        "observation": "High email open rate",
        "meaning": "Audience is engaged with email content",
        "action": "Double down on email marketing strategy",
    },
    {
        "id": "demo-signal-2",
        "play_id": "demo-play-2",
        "observation": "Low ad click-through",
        "meaning": "Ad creative needs improvement",
        "action": "A/B test new ad variations",
    },
    {
        "id": "demo-signal-3",
        "play_id": "demo-play-1",
        "observation": "Positive social mentions",
        "meaning": "Brand sentiment is improving",
        "action": "Amplify positive social content",
    },
)


def is_demo_mode() -> bool:
    return settings.demo_mode


def skip_response() -> Optional[SuccessResponse]:
    """The acknowledgement a mutating route returns instead of writing, or None."""
    if not is_demo_mode():
        return None
    logger.info("Demo mode: mutating request acknowledged without writing")
    return SuccessResponse(success=True, demo=True, message=SKIPPED_MESSAGE)


class DemoService:

    async def seed(self, store: Store) -> None:
        """Create the demo team, plays and signals unless they already exist."""
        await store.run(store.insert_or_ignore(Team, id=DEMO_TEAM_ID, name=DEMO_TEAM_NAME))
        for play in DEMO_PLAYS:
            await store.run(
                store.insert_or_ignore(
                    Play, team_id=DEMO_TEAM_ID, signals="", status="active", **play
                )
            )
        for signal in DEMO_SIGNALS:
            await store.run(store.insert_or_ignore(Signal, **signal))

    async def login(self, store: Store) -> UserOut:
        """
        Demo sign-in: upsert the demo user and seed sample data.

        Raises:
            ForbiddenError: DEMO_MODE is off (→ 403)
        """
        if not is_demo_mode():
            raise ForbiddenError(message="Demo mode not enabled")

        await store.run(store.insert_or_ignore(User, **DEMO_USER.model_dump()))
        await self.seed(store)
        logger.info("Demo sign-in; sample data ensured for %s", DEMO_TEAM_ID)
        return DEMO_USER


# ── Singleton Instance ────────────────────────────────────────────────────
demo_service = DemoService()
