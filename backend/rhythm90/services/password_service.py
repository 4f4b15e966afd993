"""
Rhythm90 Backend — Password Reset Service
==========================================

What:  Issues password reset tokens and redeems them.
How:   A request stores a random token valid for 24 hours and logs the reset
       link (no mailer is wired up yet). A reset purges expired tokens, looks
       the token up, stores the new password hash and deletes the token.
Who:   Called by rhythm90.routes.password.

Account privacy:
    POST /request-password-reset answers the same way whether or not the
    email belongs to an account, so the endpoint never reveals which
    addresses are registered.

Hashing:
    Passwords are stored as passlib hashes (pbkdf2_sha256), never in
    plain text.
"""

import logging
from datetime import datetime, timedelta, timezone

from passlib.context import CryptContext
from sqlalchemy import delete, func, insert, select, update

from rhythm90.config import settings
from rhythm90.exceptions import TooManyRequestsError, ValidationError
from rhythm90.models import PasswordResetToken, User, new_id
from rhythm90.store import Store

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

TOKEN_TTL = timedelta(hours=24)
RATE_WINDOW = timedelta(hours=1)
MAX_REQUESTS_PER_WINDOW = 5

RESET_REQUESTED_MESSAGE = "If an account exists, a reset link has been sent."
TOO_MANY_REQUESTS_MESSAGE = "Too many reset requests. Please try again later."
INVALID_TOKEN_MESSAGE = "Invalid or expired reset token"
PASSWORD_UPDATED_MESSAGE = "Password updated successfully"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


class PasswordResetService:

    async def request_reset(self, store: Store, email: str) -> str:
        """
        Issue a reset token for the account registered under email.

        Returns:
            The generic acknowledgement, for known and unknown emails alike.

        Raises:
            TooManyRequestsError: the account already has 5 tokens issued in
                the last hour (→ 429)
        """
        user = await store.first(select(User.id).where(User.email == email))
        if user is None:
            logger.info("Password reset requested for an unknown email")
            return RESET_REQUESTED_MESSAGE

        now = datetime.now(timezone.utc)
        recent = await store.first(
            select(func.count().label("count"))
            .select_from(PasswordResetToken)
            .where(
                PasswordResetToken.user_id == user["id"],
                PasswordResetToken.created_at > now - RATE_WINDOW,
            )
        )
        if recent and recent["count"] >= MAX_REQUESTS_PER_WINDOW:
            logger.warning("Password reset limit reached for user %s", user["id"])
            raise TooManyRequestsError(
                message=TOO_MANY_REQUESTS_MESSAGE,
                context={"user_id": user["id"]},
            )

        token = new_id()
        await store.run(
            insert(PasswordResetToken).values(
                id=new_id(),
                user_id=user["id"],
                token=token,
                expires_at=now + TOKEN_TTL,
                created_at=now,
            )
        )
        # TODO: send the link by email once a mail provider is configured
        logger.info("Password reset link: %s/reset-password?token=%s", settings.app_url, token)
        return RESET_REQUESTED_MESSAGE

    async def reset_password(self, store: Store, token: str, password: str) -> str:
        """
        Redeem a reset token.

        Raises:
            ValidationError: token unknown, already used or expired (→ 400)
        """
        now = datetime.now(timezone.utc)
        purged = await store.run(
            delete(PasswordResetToken).where(PasswordResetToken.expires_at < now)
        )
        if purged > 0:
            logger.info("Purged %d expired password reset token(s)", purged)
            # Kept even when this token turns out to be invalid
            await store.commit()

        reset = await store.first(
            select(PasswordResetToken.user_id).where(
                PasswordResetToken.token == token,
                PasswordResetToken.expires_at >= now,
            )
        )
        if reset is None:
            raise ValidationError(message=INVALID_TOKEN_MESSAGE, field="token")

        await store.run(
            update(User)
            .where(User.id == reset["user_id"])
            .values(password_hash=hash_password(password))
        )
        await store.run(delete(PasswordResetToken).where(PasswordResetToken.token == token))
        logger.info("Password reset for user %s", reset["user_id"])
        return PASSWORD_UPDATED_MESSAGE


# ── Singleton Instance ────────────────────────────────────────────────────
password_reset_service = PasswordResetService()
