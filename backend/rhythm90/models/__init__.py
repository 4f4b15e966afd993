"""
ORM models. Importing this package registers every table with Base.metadata,
which Alembic's --autogenerate and the test suite's create_all() rely on.
"""

from rhythm90.models.play import Play, Signal, new_id
from rhythm90.models.team import PasswordResetToken, Team, TeamUser, User
from rhythm90.models.growth import (
    AnalyticsEvent,
    FeatureFlag,
    Invite,
    Notification,
    WaitlistEntry,
)

__all__ = [
    "AnalyticsEvent",
    "FeatureFlag",
    "Invite",
    "Notification",
    "PasswordResetToken",
    "Play",
    "Signal",
    "Team",
    "TeamUser",
    "User",
    "WaitlistEntry",
    "new_id",
]
