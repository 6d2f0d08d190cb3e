"""
Pydantic models for water counters and the leaderboard.

Counter responses keep the raw column names (``daily_water`` and so
on) because the client reads them unchanged from the scoreboard and
add‑water responses.
"""

from typing import Optional

from pydantic import BaseModel, Field


class WaterAdd(BaseModel):
    """Payload for ``PATCH /add-water/{userName}``.

    ``amount`` is applied as given; zero and negative values are
    accepted and may take counters below zero.
    """

    amount: int = Field(..., examples=[250])


class WaterTotals(BaseModel):
    """The three counters of one account after an increment."""

    daily_water: int
    week_water: int
    total_water: int


class LeaderboardEntry(BaseModel):
    """One row of the scoreboard."""

    user_name: str
    profile_picture_url: Optional[str] = None
    daily_water: int
    week_water: int
    total_water: int
