"""
Water counter endpoints: add water, scoreboard and the bulk resets.

The reset endpoints are meant to be called by an external scheduler
(see ``reset_counters.py``); they are not protected.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends

from water_tracker_api.app.api.deps import get_db
from water_tracker_api.app.core.db import Database
from water_tracker_api.app.schemas.counter import LeaderboardEntry, WaterAdd, WaterTotals
from water_tracker_api.app.services.counter_service import CounterService


router = APIRouter()


@router.patch("/add-water/{user_name}", response_model=WaterTotals)
def add_water(user_name: str, payload: WaterAdd, db: Database = Depends(get_db)) -> WaterTotals:
    """Add ``amount`` to the daily, weekly and total counters."""
    return CounterService.add_water(db, user_name, payload.amount)


@router.get("/scoreboard", response_model=List[LeaderboardEntry])
def scoreboard(db: Database = Depends(get_db)) -> List[LeaderboardEntry]:
    """All accounts ordered by total water, highest first."""
    return CounterService.leaderboard(db)


@router.post("/reset-daily")
def reset_daily(db: Database = Depends(get_db)) -> Dict[str, str]:
    CounterService.reset_daily(db)
    return {"message": "Daily water reset for all users!"}


@router.post("/reset-week")
def reset_week(db: Database = Depends(get_db)) -> Dict[str, str]:
    CounterService.reset_weekly(db)
    return {"message": "Week water reset for all users!"}
