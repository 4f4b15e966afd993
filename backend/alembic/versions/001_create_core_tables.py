"""Create core tables

Revision ID: 001
Revises: None
Create Date: 2025-01-20 00:00:00.000000+00:00

What:  Creates the board tables (plays, signals), the team and user tables,
       and the supporting growth, flag, invite and notification tables.
How:   Portable column types only, so the same revision runs on PostgreSQL
       and on SQLite for local development.

Rollback: downgrade() drops every table (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    # ── Board ────────────────────────────────────────────────────────────
    op.create_table(
        "plays",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("team_id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("target_outcome", sa.Text(), nullable=True),
        sa.Column("why_this_play", sa.Text(), nullable=True),
        sa.Column("how_to_run", sa.Text(), nullable=True),
        # Free-text notes on the play, unrelated to the signals table
        sa.Column("signals", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column("status", sa.String(50), nullable=False, server_default=sa.text("'active'")),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_plays_team_id", "plays", ["team_id"])

    # play_id deliberately has no foreign key: signals may reference unknown plays
    op.create_table(
        "signals",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("play_id", sa.String(64), nullable=False),
        sa.Column("observation", sa.Text(), nullable=False),
        sa.Column("meaning", sa.Text(), nullable=False),
        sa.Column("action", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_signals_play_id", "signals", ["play_id"])

    # ── Teams and users ──────────────────────────────────────────────────
    op.create_table(
        "teams",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "team_users",
        sa.Column("team_id", sa.String(64), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("role", sa.String(50), nullable=False, server_default=sa.text("'member'")),
        sa.PrimaryKeyConstraint("team_id", "user_id"),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("provider", sa.String(50), nullable=True),
        sa.Column("role", sa.String(50), nullable=False, server_default=sa.text("'member'")),
        sa.Column("is_premium", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.PrimaryKeyConstraint("id"),
    )

    # ── Flags, growth, invites, notifications ────────────────────────────
    op.create_table(
        "feature_flags",
        sa.Column("key", sa.String(100), nullable=False),
        sa.Column("enabled", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.PrimaryKeyConstraint("key"),
    )

    op.create_table(
        "analytics_events",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("event", sa.String(255), nullable=False),
        sa.Column("data", sa.Text(), nullable=False, server_default=sa.text("'{}'")),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "waitlist",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "invites",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("token", sa.String(64), nullable=False),
        sa.Column("accepted", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token"),
    )

    op.create_table(
        "notifications",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("notifications")
    op.drop_table("invites")
    op.drop_table("waitlist")
    op.drop_table("analytics_events")
    op.drop_table("feature_flags")
    op.drop_table("users")
    op.drop_table("team_users")
    op.drop_table("teams")
    op.drop_index("idx_signals_play_id", table_name="signals")
    op.drop_table("signals")
    op.drop_index("idx_plays_team_id", table_name="plays")
    op.drop_table("plays")
