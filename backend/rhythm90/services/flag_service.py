"""
Rhythm90 Backend — Feature Flag Service
========================================

What:  Reads all feature flags as a {key: bool} map and toggles one flag.
Who:   Called by rhythm90.routes.flags; the frontend's feature-flag hook
       fetches the map on load.
"""

import logging
from typing import Dict

from sqlalchemy import select, update

from rhythm90.models import FeatureFlag
from rhythm90.store import Store

logger = logging.getLogger(__name__)


class FlagService:

    async def list_flags(self, store: Store) -> Dict[str, bool]:
        rows = await store.all(select(FeatureFlag.key, FeatureFlag.enabled))
        return {row["key"]: bool(row["enabled"]) for row in rows}

    async def set_flag(self, store: Store, key: str, enabled: bool) -> None:
        """
        Update an existing flag. Flags are created by migrations or seeding,
        so an unknown key updates nothing.
        """
        updated = await store.run(
            update(FeatureFlag).where(FeatureFlag.key == key).values(enabled=enabled)
        )
        if not updated:
            logger.warning("Feature flag %s does not exist; nothing updated", key)
        else:
            logger.info("Feature flag %s set to %s", key, enabled)


# ── Singleton Instance ────────────────────────────────────────────────────
flag_service = FlagService()
