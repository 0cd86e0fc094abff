"""
Workout history endpoints.

Read-only; records are created by finishing a workout.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.api.dependencies import get_current_user, get_runtime
from app.db.session import get_db
from app.models.user import User
from app.schemas.routine import WorkoutCategory
from app.schemas.workout_history import WorkoutHistoryResponse
from app.services.history_service import HistoryService
from app.workout.clock import local_day, week_start
from app.workout.runtime import WorkoutRuntime

router = APIRouter()


@router.get("", summary="List finished workouts, newest first.", response_model=list[WorkoutHistoryResponse])
def list_history(category: Optional[WorkoutCategory] = Query(None, description="Only this workout type"),
                 limit: Optional[int] = Query(None, ge=1, le=500), db: Session = Depends(get_db),
                 user: User = Depends(get_current_user), ):
    return HistoryService(db).get_all(user.id, category=category, limit=limit)


@router.get("/recent", summary="Most recent finished workouts.", response_model=list[WorkoutHistoryResponse])
def recent_history(limit: int = Query(5, ge=1, le=50), db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    return HistoryService(db).recent(user.id, limit=limit)


@router.get("/week", summary="Workouts of one Monday-based week.", response_model=list[WorkoutHistoryResponse])
def week_history(week_of: Optional[datetime.date] = Query(None, description="Any day of the week (defaults to today)"),
                 db: Session = Depends(get_db), user: User = Depends(get_current_user),
                 runtime: WorkoutRuntime = Depends(get_runtime), ):
    day = week_of or local_day(runtime.clock(), runtime.tz_name)
    return HistoryService(db, tz_name=runtime.tz_name).for_week(user.id, week_start(day))


@router.get("/{record_id}", summary="Get one finished workout.", response_model=WorkoutHistoryResponse)
def get_history_record(record_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return HistoryService(db).get(user.id, record_id)
