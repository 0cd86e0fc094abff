"""
Analytics endpoints: streak and volume/set/rep stats.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.api.dependencies import get_current_user, get_runtime
from app.db.session import get_db
from app.models.user import User
from app.schemas.stats import DailyStats, WeeklyStats
from app.schemas.user import StreakResponse
from app.workout.clock import local_day, week_start
from app.workout.runtime import WorkoutRuntime
from app.workout.stats import compute_daily_stats, compute_weekly_stats
from app.workout.streaks import recompute_streak

router = APIRouter()


@router.get(
    "/stats/daily",
    summary="Completed volume, sets and reps for one day.",
    response_model=DailyStats,
)
def get_daily_stats(
    day: Optional[datetime.date] = Query(
        None, description="Local calendar day (defaults to today)"
    ),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
    runtime: WorkoutRuntime = Depends(get_runtime),
):
    ref_day = day or local_day(runtime.clock(), runtime.tz_name)
    return compute_daily_stats(db, user.id, ref_day, runtime.tz_name)


@router.get(
    "/stats/weekly",
    summary="Completed volume, sets and reps for one Monday-based week.",
    response_model=WeeklyStats,
)
def get_weekly_stats(
    week_of: Optional[datetime.date] = Query(
        None, description="Any day of the week (defaults to today)"
    ),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
    runtime: WorkoutRuntime = Depends(get_runtime),
):
    ref_day = week_of or local_day(runtime.clock(), runtime.tz_name)
    return compute_weekly_stats(db, user.id, week_start(ref_day), runtime.tz_name)


@router.get(
    "/streak",
    summary="Current and longest workout streak.",
    response_model=StreakResponse,
)
def get_streak(user: User = Depends(get_current_user)):
    return user


@router.post(
    "/streak/recompute",
    summary="Rebuild the streak from the full workout history.",
    response_model=StreakResponse,
)
def rebuild_streak(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
    runtime: WorkoutRuntime = Depends(get_runtime),
):
    as_of = local_day(runtime.clock(), runtime.tz_name)
    return recompute_streak(db, user.id, as_of, runtime.tz_name)
