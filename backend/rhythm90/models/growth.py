"""
Rhythm90 Backend — Growth, Flag, Invite and Notification Models
================================================================

What:  ORM models for the supporting tables behind the product surface:
       feature flags, analytics events, the waitlist, team invites and
       in-app notifications.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from rhythm90.database import Base
from rhythm90.models.play import new_id
from rhythm90.models.team import utcnow


class FeatureFlag(Base):
    __tablename__ = "feature_flags"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    enabled: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
    )


class AnalyticsEvent(Base):
    """
    One growth-experiment or product-usage event.

    data holds the caller's payload serialized as JSON text, "{}" when absent.
    """

    __tablename__ = "analytics_events"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)
    event: Mapped[str] = mapped_column(String(255), nullable=False)
    data: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="{}",
        server_default=text("'{}'"),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )


class WaitlistEntry(Base):
    __tablename__ = "waitlist"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )


class Invite(Base):
    """
    A pending or accepted invitation to join the admin team.

    Lifecycle:
        1. Created by POST /invite (accepted = False)
        2. Looked up by token on GET /accept-invite
        3. Flipped to accepted = True by POST /accept-invite; never reused
    """

    __tablename__ = "invites"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    token: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    accepted: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )


class Notification(Base):
    __tablename__ = "notifications"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )
