"""
Rhythm90 Backend — Board Service (Plays, Signals, RnR Summary)
==============================================================

What:  Statement building for the team board: plays, the signal log, and
       the joined results-and-review summary.
Why:   Keeps SQL shape out of the route handlers, which only pick the
       operation and return its result.
How:   Each method issues at most one statement through the Store. Writes are
       single inserts; the summary is a single joined select. There is no
       multi-statement transaction anywhere in this module.
Who:   Called by rhythm90.routes.board.

Scoping:
    Reads are scoped by configured identifiers (settings.board_team_id,
    settings.signals_play_id), not by anything in the request. A caller
    cannot read another team's board by passing a team id. Writes store
    whatever team_id / play_id the caller sent, unchecked.
"""

import logging
from typing import List

from sqlalchemy import insert, select

from rhythm90.models import Play, Signal, new_id
from rhythm90.schemas.board import PlayCreate, SignalCreate, SummaryResponse, SummaryRow
from rhythm90.store import Row, Store

logger = logging.getLogger(__name__)

DEFAULT_PLAY_STATUS = "active"


class BoardService:
    """
    Stateless operations on plays and signals.

    Every method takes the request's Store; the service holds no state, so
    one module-level instance serves all requests.
    """

    async def list_plays(self, store: Store, team_id: str) -> List[Row]:
        """
        All plays for one team, unpaginated and in store order.

        Query plan:
            SELECT * FROM plays WHERE team_id = :team_id
            → Uses idx_plays_team_id
        """
        return await store.all(select(Play.__table__).where(Play.team_id == team_id))

    async def create_play(self, store: Store, body: PlayCreate) -> str:
        """
        Insert one play with a fresh id.

        Empty or missing signals/status fall back to "" and "active".
        Identical bodies are not deduplicated: each call adds a row.

        Returns:
            The generated play id (logged; the route does not echo it).
        """
        play_id = new_id()
        await store.run(
            insert(Play).values(
                id=play_id,
                team_id=body.team_id,
                name=body.name,
                target_outcome=body.target_outcome,
                why_this_play=body.why_this_play,
                how_to_run=body.how_to_run,
                signals=body.signals or "",
                status=body.status or DEFAULT_PLAY_STATUS,
            )
        )
        logger.info("Play %s created for team %s", play_id, body.team_id)
        return play_id

    async def list_signals(self, store: Store, play_id: str) -> List[Row]:
        return await store.all(select(Signal.__table__).where(Signal.play_id == play_id))

    async def create_signal(self, store: Store, body: SignalCreate) -> str:
        """Insert one signal. The play it names is not required to exist."""
        signal_id = new_id()
        await store.run(
            insert(Signal).values(
                id=signal_id,
                play_id=body.play_id,
                observation=body.observation,
                meaning=body.meaning,
                action=body.action,
            )
        )
        logger.info("Signal %s logged against play %s", signal_id, body.play_id)
        return signal_id

    async def rnr_summary(self, store: Store, team_id: str) -> SummaryResponse:
        """
        Results-and-review view: every (play, signal) pair for one team.

        Query plan:
            SELECT plays.name, signals.observation, signals.meaning, signals.action
            FROM plays JOIN signals ON signals.play_id = plays.id
            WHERE plays.team_id = :team_id

        Plays with no signals do not appear (inner join).
        """
        rows = await store.all(
            select(Play.name, Signal.observation, Signal.meaning, Signal.action)
            .join(Signal, Signal.play_id == Play.id)
            .where(Play.team_id == team_id)
        )
        return SummaryResponse(summary=[SummaryRow(**row) for row in rows])


# ── Singleton Instance ────────────────────────────────────────────────────
board_service = BoardService()
