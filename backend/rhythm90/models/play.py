"""
Rhythm90 Backend — Play and Signal SQLAlchemy Models
=====================================================

What:  ORM models for the `plays` and `signals` tables.
Why:   Registers both tables with Base.metadata so Alembic and the test
       suite share one schema definition.
Who:   Queried by board_service, growth_service and demo_service through
       the Store.

Table Design Rationale:
    - Text primary keys: generated ids are UUID4 strings, but seeded demo
      rows use readable ids ("demo-play-1"), so the column is not UUID-typed.
    - signals.play_id is NOT a foreign key. Signals can be logged against a
      play id that does not (yet) exist, and the router must accept them.
    - Neither table has update or delete paths in this backend; rows are
      append-only from the API's point of view.
"""

import uuid

from sqlalchemy import Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from rhythm90.database import Base


def new_id() -> str:
    """Fresh unique identifier for a created row."""
    return str(uuid.uuid4())


class Play(Base):
    """
    A tracked marketing initiative belonging to one team.

    Defaults:
        status  → "active"
        signals → "" (free-text notes, distinct from the signals table)
    """

    __tablename__ = "plays"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)
    team_id: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    target_outcome: Mapped[str | None] = mapped_column(Text, nullable=True)
    why_this_play: Mapped[str | None] = mapped_column(Text, nullable=True)
    how_to_run: Mapped[str | None] = mapped_column(Text, nullable=True)
    signals: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        server_default=text("''"),
    )
    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="active",
        server_default=text("'active'"),
    )

    # GET /board and the RnR summary both filter by team
    __table_args__ = (Index("idx_plays_team_id", "team_id"),)

    def __repr__(self) -> str:
        return f"<Play(id={self.id}, team_id='{self.team_id}', name='{self.name}')>"


class Signal(Base):
    """An observation logged against a play, with its meaning and follow-up action."""

    __tablename__ = "signals"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)
    play_id: Mapped[str] = mapped_column(String(64), nullable=False)
    observation: Mapped[str] = mapped_column(Text, nullable=False)
    meaning: Mapped[str] = mapped_column(Text, nullable=False)
    action: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (Index("idx_signals_play_id", "play_id"),)

    def __repr__(self) -> str:
        return f"<Signal(id={self.id}, play_id='{self.play_id}')>"
