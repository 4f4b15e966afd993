"""
Rhythm90 Backend — Store Adapter (Data Access)
===============================================

What:  The one seam between route handlers and the relational store.
Why:   Handlers need exactly three things from the database: "give me every
       row", "give me the first row", and "run this write". Keeping that
       contract narrow means a test can swap in an in-memory database or a
       fake without touching a single route.
How:   Wraps one AsyncSession. Statements are SQLAlchemy Core constructs, so
       every value is bound as a parameter by the driver, never formatted
       into SQL text.
Who:   Services receive a Store; routes receive it from `get_store`.
When:  One Store per request, bound to that request's session.

Contract:
    all(stmt)   → list of row mappings (plain dicts)
    first(stmt) → first row mapping, or None
    run(stmt)   → affected row count
    commit()    → make earlier writes durable before a later failure

    No pooling or retries live here. The final commit and the
    rollback on error belong to the session dependency in rhythm90.database.
"""

import logging
from typing import Any, AsyncGenerator, Dict, List, Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from rhythm90.database import get_db_session

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


class Store:
    """Executes parameterized statements on a single session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def all(self, statement: Executable) -> List[Row]:
        result = await self.session.execute(statement)
        return [dict(row) for row in result.mappings().all()]

    async def first(self, statement: Executable) -> Optional[Row]:
        result = await self.session.execute(statement)
        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def run(self, statement: Executable) -> int:
        """
        Execute a write statement and report completion.

        Returns:
            Number of rows the statement touched. Drivers report -1 when the
            count is unknown; callers treat any return as "completed".
        """
        result = await self.session.execute(statement)
        logger.debug("Statement affected %s row(s)", result.rowcount)
        return result.rowcount

    async def commit(self) -> None:
        """Make the writes so far durable even if the request later fails."""
        await self.session.commit()

    def insert_or_ignore(self, model: Any, **values: Any) -> Executable:
        """
        Build an INSERT that silently skips rows whose key already exists.

        Used for seeding and provider sign-in, where re-running must not fail.
        PostgreSQL and SQLite both spell this ON CONFLICT DO NOTHING, but the
        construct lives in each dialect's own insert().
        """
        dialect = self.session.get_bind().dialect.name
        if dialect == "postgresql":
            from sqlalchemy.dialects.postgresql import insert as dialect_insert
        elif dialect == "sqlite":
            from sqlalchemy.dialects.sqlite import insert as dialect_insert
        else:
            raise NotImplementedError(f"insert_or_ignore is not supported on {dialect}")
        return dialect_insert(model).values(**values).on_conflict_do_nothing()


async def get_store(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[Store, None]:
    """
    FastAPI dependency yielding a Store bound to the per-request session.

    Why a generator: the session's commit/rollback runs after the handler
    returns, so the store must not outlive it.
    """
    yield Store(session)
