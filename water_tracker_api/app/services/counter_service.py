"""
Business logic for water counters.

Every mutation is one relative ``UPDATE`` statement, so concurrent
increments for the same account never lose updates and the three
counters always change together.  Resets race with increments on a
last‑writer‑wins basis.
"""

import logging
from typing import List

from ..core.db import Database
from ..core.errors import NotFoundError
from ..schemas.counter import LeaderboardEntry, WaterTotals

logger = logging.getLogger(__name__)


class CounterService:
    """Increment, reset and rank the daily, weekly and total counters."""

    @classmethod
    def add_water(cls, db: Database, user_name: str, amount: int) -> WaterTotals:
        """Add ``amount`` to all three counters of ``user_name``.

        The amount is not range checked; negative values decrease the
        counters, possibly below zero.  Raises ``NotFoundError`` if no
        account matches.
        """
        with db.cursor() as cursor:
            row = cursor.execute(
                """
                UPDATE users
                SET daily_water = daily_water + ?,
                    week_water = week_water + ?,
                    total_water = total_water + ?
                WHERE user_name = ?
                RETURNING daily_water, week_water, total_water
                """,
                (amount, amount, amount, user_name),
            ).fetchone()
        if not row:
            raise NotFoundError("User not found")
        logger.debug("Added %d to %s", amount, user_name)
        return WaterTotals(
            daily_water=row["daily_water"],
            week_water=row["week_water"],
            total_water=row["total_water"],
        )

    @classmethod
    def reset_daily(cls, db: Database) -> int:
        """Zero ``daily_water`` for every account; return the row count."""
        with db.cursor() as cursor:
            cursor.execute("UPDATE users SET daily_water = 0")
            affected = cursor.rowcount
        logger.info("Daily water reset for %d users", affected)
        return affected

    @classmethod
    def reset_weekly(cls, db: Database) -> int:
        """Zero ``week_water`` for every account; return the row count."""
        with db.cursor() as cursor:
            cursor.execute("UPDATE users SET week_water = 0")
            affected = cursor.rowcount
        logger.info("Week water reset for %d users", affected)
        return affected

    @classmethod
    def leaderboard(cls, db: Database) -> List[LeaderboardEntry]:
        """Return all accounts ordered by ``total_water`` descending.

        The order among accounts with equal totals is whatever SQLite
        produces and must not be relied upon.
        """
        with db.cursor() as cursor:
            rows = cursor.execute(
                "SELECT user_name, profile_picture_url, daily_water, week_water, total_water "
                "FROM users ORDER BY total_water DESC"
            ).fetchall()
        return [
            LeaderboardEntry(
                user_name=row["user_name"],
                profile_picture_url=row["profile_picture_url"],
                daily_water=row["daily_water"],
                week_water=row["week_water"],
                total_water=row["total_water"],
            )
            for row in rows
        ]
