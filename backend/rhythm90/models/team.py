"""
Rhythm90 Backend — Team, Membership and User Models
====================================================

What:  ORM models for `teams`, `team_users`, `users` and
       `password_reset_tokens`.
Why:   Teams are the ownership boundary for plays; users carry the role and
       premium flags the admin routes check.
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from rhythm90.database import Base
from rhythm90.models.play import new_id


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Team(Base):
    __tablename__ = "teams"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )


class TeamUser(Base):
    """
    Membership of one user in one team.

    Composite primary key: a user appears at most once per team.
    """

    __tablename__ = "team_users"

    team_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    role: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="member",
        server_default=text("'member'"),
    )


class User(Base):
    """
    A person who signs in through a provider (google, microsoft, demo, invite).

    role:       "member" or "admin"; admin unlocks /admin/teams, flag updates
                and invites
    is_premium: set by billing, read by GET /premium-content
    password_hash: set by POST /reset-password; NULL for provider-only users
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    provider: Mapped[str | None] = mapped_column(String(50), nullable=True)
    role: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="member",
        server_default=text("'member'"),
    )
    is_premium: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
    )
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"


class PasswordResetToken(Base):
    """
    A one-time password reset token.

    Lifecycle:
        1. Issued by POST /request-password-reset, valid for 24 hours
        2. Consumed (deleted) by POST /reset-password
        3. Expired rows are purged on every reset attempt

    created_at also drives the per-user request limit (5 per hour).
    """

    __tablename__ = "password_reset_tokens"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False)
    token: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (Index("idx_password_reset_tokens_user_id", "user_id"),)
