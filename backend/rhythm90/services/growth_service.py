"""
Rhythm90 Backend — Growth Service
==================================

What:  Product-usage analytics events, the marketing-site waitlist, and the
       dashboard counters.
Who:   Called by rhythm90.routes.growth.

Analytics payloads:
    The frontend's experiment hook posts {event, data}. data is free-form,
    so it is stored as JSON text rather than spread into columns.
"""

import json
import logging
import re
from typing import Any, Dict, Optional

from sqlalchemy import func, insert, select

from rhythm90.exceptions import ValidationError
from rhythm90.models import AnalyticsEvent, Play, Signal, WaitlistEntry, new_id
from rhythm90.schemas.account import DashboardStats
from rhythm90.store import Store

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class GrowthService:

    async def record_event(
        self, store: Store, event: str, data: Optional[Dict[str, Any]]
    ) -> None:
        await store.run(
            insert(AnalyticsEvent).values(id=new_id(), event=event, data=json.dumps(data or {}))
        )
        logger.info("Analytics event %s recorded", event)

    async def join_waitlist(self, store: Store, email: str) -> None:
        """
        Raises:
            ValidationError: email is not of the form local@domain.tld (→ 400)
        """
        if not EMAIL_PATTERN.fullmatch(email):
            raise ValidationError(message="Invalid email format", field="email")
        await store.run(insert(WaitlistEntry).values(id=new_id(), email=email))
        logger.info("Waitlist signup recorded")

    async def dashboard_stats(self, store: Store, team_id: str) -> DashboardStats:
        """
        Play and signal counts for one team.

        Signals are counted through their play: a signal whose play_id names
        no play on this team is not counted.
        """
        plays = await store.first(
            select(func.count().label("count")).select_from(Play).where(Play.team_id == team_id)
        )
        team_play_ids = select(Play.id).where(Play.team_id == team_id)
        signals = await store.first(
            select(func.count().label("count"))
            .select_from(Signal)
            .where(Signal.play_id.in_(team_play_ids))
        )
        return DashboardStats(
            playCount=plays["count"] if plays else 0,
            signalCount=signals["count"] if signals else 0,
        )


# ── Singleton Instance ────────────────────────────────────────────────────
growth_service = GrowthService()
