"""
Rhythm90 Backend — User Service
================================
What:  Current-user profile reads and updates, admin and premium checks,
       and the provider sign-in stubs.
Who:   Called by the auth, users, admin, flags and invites routes.

Identity:
    There is no session authentication yet. "The current user" is the
    configured settings.current_user_id, and provider sign-ins upsert a
    fixed user per provider.
"""

import logging
import re
from typing import Any, Dict, Optional

from sqlalchemy import select, update

from rhythm90.exceptions import (
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from rhythm90.models import User
from rhythm90.schemas.account import UserOut
from rhythm90.store import Row, Store

logger = logging.getLogger(__name__)

# Letters, digits, whitespace, hyphen and dot
NAME_PATTERN = re.compile(r"^[a-zA-Z0-9\s\-\.]+$")
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50

# Served by GET /premium-content until premium features have real data
PREMIUM_CONTENT: Dict[str, Any] = {
    "advancedAnalytics": {
        "title": "Advanced Analytics Dashboard",
        "description": "Deep insights into your marketing performance",
        "data": {"conversionRate": "15.2%", "engagementScore": "8.7/10", "roi": "3.2x"},
    },
    "unlimitedPlays": {
        "title": "Unlimited Marketing Plays",
        "description": "Create as many plays as you need",
        "limit": "Unlimited",
    },
    "aiAssistant": {
        "title": "AI Marketing Assistant",
        "description": "Advanced AI-powered insights and recommendations",
        "features": ["Predictive analytics", "Automated reporting", "Smart suggestions"],
    },
}

# Fixed ids handed out by the provider sign-in stubs
PROVIDER_USER_IDS = {
    "google": "user-123",
    "microsoft": "user-456",
}


class UserService:

    async def get_user(self, store: Store, user_id: str) -> Optional[Row]:
        return await store.first(
            select(
                User.id,
                User.email,
                User.name,
                User.provider,
                User.role,
                User.is_premium,
            ).where(User.id == user_id)
        )

    async def get_profile(self, store: Store, user_id: str) -> UserOut:
        """
        Raises:
            NotFoundError: no user row for user_id (→ 404)
        """
        user = await self.get_user(store, user_id)
        if user is None:
            raise NotFoundError(resource="user", resource_id=user_id)
        return UserOut(**user)

    async def update_name(self, store: Store, user_id: str, name: str) -> None:
        """
        Rename a user after checking the display-name rules.

        Rules:
            - 2 to 50 characters
            - only letters, digits, whitespace, '-' and '.'

        Raises:
            ValidationError: a rule failed (→ 400); nothing is written
        """
        if len(name) < NAME_MIN_LENGTH or len(name) > NAME_MAX_LENGTH:
            raise ValidationError(
                message=f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters",
                field="name",
            )
        if not NAME_PATTERN.fullmatch(name):
            raise ValidationError(message="Name contains invalid characters", field="name")

        await store.run(update(User).where(User.id == user_id).values(name=name))
        logger.info("User %s renamed", user_id)

    async def is_admin(self, store: Store, user_id: str) -> bool:
        row = await store.first(select(User.role).where(User.id == user_id))
        return row is not None and row["role"] == "admin"

    async def is_premium(self, store: Store, user_id: str) -> bool:
        row = await store.first(select(User.is_premium).where(User.id == user_id))
        return row is not None and bool(row["is_premium"])

    async def premium_content(self, store: Store, user_id: str) -> Dict[str, Any]:
        """
        Raises:
            ForbiddenError: user is missing or not premium (→ 403)
        """
        if not await self.is_premium(store, user_id):
            raise ForbiddenError(message="Premium subscription required")
        return PREMIUM_CONTENT

    async def ensure_admin(self, store: Store, user_id: str) -> None:
        """
        Raises:
            UnauthorizedError: user is missing or not an admin (→ 401)
        """
        if not await self.is_admin(store, user_id):
            logger.warning("Admin-only action refused for user %s", user_id)
            raise UnauthorizedError(context={"user_id": user_id})

    async def provider_login(
        self, store: Store, provider: str, email: str, name: str
    ) -> UserOut:
        """
        Sign-in stub for an OAuth provider.

        Upserts the provider's fixed member user. A second sign-in leaves the
        stored row untouched; the response echoes the submitted email and name.
        """
        user = UserOut(
            id=PROVIDER_USER_IDS[provider],
            email=email,
            name=name,
            provider=provider,
            role="member",
            is_premium=False,
        )
        await store.run(store.insert_or_ignore(User, **user.model_dump()))
        logger.info("Provider sign-in via %s for user %s", provider, user.id)
        return user


# ── Singleton Instance ────────────────────────────────────────────────────
user_service = UserService()
