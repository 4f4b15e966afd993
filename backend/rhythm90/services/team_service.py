"""
Rhythm90 Backend — Team Service
================================

What:  Team membership for the admin panel, and the cross-team listing
       shown to platform admins.
Who:   Called by rhythm90.routes.admin and InviteService.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy import delete, func, insert, select

from rhythm90.models import Team, TeamUser
from rhythm90.store import Row, Store

logger = logging.getLogger(__name__)


class TeamService:

    async def list_members(self, store: Store, team_id: str) -> List[Row]:
        return await store.all(select(TeamUser.__table__).where(TeamUser.team_id == team_id))

    async def add_member(self, store: Store, team_id: str, user_id: str, role: str) -> None:
        # A duplicate (team_id, user_id) violates the primary key and fails the request
        await store.run(insert(TeamUser).values(team_id=team_id, user_id=user_id, role=role))
        logger.info("User %s added to team %s as %s", user_id, team_id, role)

    async def remove_member(self, store: Store, team_id: str, user_id: str) -> None:
        """Removing a user who is not a member is a no-op, not an error."""
        removed = await store.run(
            delete(TeamUser).where(TeamUser.team_id == team_id, TeamUser.user_id == user_id)
        )
        logger.info("User %s removed from team %s (%s row(s))", user_id, team_id, removed)

    async def list_teams(self, store: Store) -> Dict[str, Any]:
        """Every team plus a separate COUNT, shaped for the admin dashboard."""
        teams = await store.all(select(Team.__table__))
        count = await store.first(select(func.count().label("count")).select_from(Team))
        return {"teams": teams, "teamCount": count["count"] if count else 0}


# ── Singleton Instance ────────────────────────────────────────────────────
team_service = TeamService()
