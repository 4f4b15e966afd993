"""
Rhythm90 Backend — Notification Service
========================================

What:  In-app notification feed polled by the navbar badge.
How:   The frontend polls with `since` (epoch milliseconds of its last poll)
       and gets everything newer, newest first.
"""

import logging
import math
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from sqlalchemy import desc, insert, select

from rhythm90.models import Notification, new_id
from rhythm90.store import Row, Store

logger = logging.getLogger(__name__)

# Window used when the client sends no usable `since`
DEFAULT_LOOKBACK = timedelta(minutes=5)

SAMPLE_NOTIFICATIONS = (
    "Kickoff scheduled for Monday at 10 AM.",
    "New signal logged in Play Alpha.",
    "R&R Summary updated for Q1.",
    "Team meeting reminder: Friday 2 PM.",
)


def parse_since(raw: Optional[str], now: Optional[datetime] = None) -> datetime:
    """
    Convert the `since` query value (epoch ms) to an aware UTC datetime.

    Missing, non-numeric, non-finite, zero or out-of-range values fall back
    to five minutes before now.
    """
    now = now or datetime.now(timezone.utc)
    try:
        millis = float(raw) if raw is not None else 0.0
    except ValueError:
        millis = 0.0
    if not millis or not math.isfinite(millis):
        return now - DEFAULT_LOOKBACK
    try:
        return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        # Beyond what the platform's time functions can represent
        return now - DEFAULT_LOOKBACK


class NotificationService:

    async def list_since(self, store: Store, since: datetime) -> List[Row]:
        return await store.all(
            select(Notification.__table__)
            .where(Notification.created_at > since)
            .order_by(desc(Notification.created_at))
        )

    async def create_samples(self, store: Store) -> int:
        for message in SAMPLE_NOTIFICATIONS:
            await store.run(insert(Notification).values(id=new_id(), message=message))
        logger.info("Created %d sample notifications", len(SAMPLE_NOTIFICATIONS))
        return len(SAMPLE_NOTIFICATIONS)


# ── Singleton Instance ────────────────────────────────────────────────────
notification_service = NotificationService()
