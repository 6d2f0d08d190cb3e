"""
Business logic for accounts.

``AccountService`` creates accounts, checks credentials and updates
profile pictures.  Passwords are hashed with bcrypt before they reach
the database and the hash is never returned to callers.
"""

import logging
from typing import Optional

from ..core.db import Database
from ..core.errors import InvalidCredentialsError, NotFoundError
from ..core.security import hash_password, verify_password
from ..schemas.account import AccountCreate, AccountSummary, ProfileRead

logger = logging.getLogger(__name__)


class AccountService:
    """Account creation, authentication and profile updates."""

    @classmethod
    def create_account(cls, db: Database, data: AccountCreate) -> int:
        """Create a new account and return its ID.

        Counters start at the database defaults (0).  There is no
        uniqueness pre‑check: a duplicate user name surfaces as the
        ``ConflictError`` raised by the storage layer.
        """
        logger.info("Registering user %s", data.user_name)
        # Hash outside the connection checkout.
        hashed = hash_password(data.password)
        with db.cursor() as cursor:
            cursor.execute(
                "INSERT INTO users (user_name, profile_picture_url, password, recovery_email) "
                "VALUES (?, ?, ?, ?)",
                (data.user_name, data.profile_picture_url, hashed, data.recovery_email),
            )
            return cursor.lastrowid

    @classmethod
    def authenticate(cls, db: Database, user_name: str, password: str) -> AccountSummary:
        """Return the account summary if ``password`` matches.

        Raises ``NotFoundError`` for an unknown user name and
        ``InvalidCredentialsError`` for a wrong password.
        """
        with db.cursor() as cursor:
            row = cursor.execute(
                "SELECT id, user_name, profile_picture_url, password, "
                "daily_water, week_water, total_water FROM users WHERE user_name = ?",
                (user_name,),
            ).fetchone()
        if not row:
            raise NotFoundError("User not found")
        if not verify_password(password, row["password"]):
            raise InvalidCredentialsError("Incorrect password")
        return AccountSummary(
            id=row["id"],
            user_name=row["user_name"],
            profile_picture_url=row["profile_picture_url"],
            daily_water=row["daily_water"],
            week_water=row["week_water"],
            total_water=row["total_water"],
        )

    @classmethod
    def update_profile_picture(
        cls, db: Database, user_name: str, profile_picture_url: Optional[str]
    ) -> ProfileRead:
        """Set a new profile picture URL.

        ``user_name`` must already be decoded; no percent‑decoding
        happens here.  Raises ``NotFoundError`` if no account matches.
        """
        logger.info("Updating profile picture of %s", user_name)
        with db.cursor() as cursor:
            row = cursor.execute(
                "UPDATE users SET profile_picture_url = ? WHERE user_name = ? "
                "RETURNING id, user_name, profile_picture_url",
                (profile_picture_url, user_name),
            ).fetchone()
        if not row:
            logger.warning("Profile update for unknown user %s", user_name)
            raise NotFoundError("User not found")
        return ProfileRead(
            id=row["id"],
            user_name=row["user_name"],
            profile_picture_url=row["profile_picture_url"],
        )
