"""
Workout history service.

Read-only access to the owner's finished workouts.  Records are written
by the history commit service when a session finishes.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.workout_history import WorkoutHistoryRepository
from app.schemas.routine import WorkoutCategory
from app.schemas.workout_history import WorkoutHistoryResponse
from app.workout.stats import workouts_for_week


class HistoryService:
    """Service for workout history queries."""

    def __init__(self, session: Session, tz_name: str = "UTC"):
        self.session = session
        self.repository = WorkoutHistoryRepository(session)
        self.tz_name = tz_name

    def get_all(self, owner_id: str, category: Optional[WorkoutCategory] = None,
             limit: Optional[int] = None, ) -> list[WorkoutHistoryResponse]:
        category_value = category.value if category is not None else None
        records = self.repository.get_by_owner(owner_id, category=category_value, limit=limit)
        return [WorkoutHistoryResponse.from_record(r) for r in records]

    def recent(self, owner_id: str, limit: int = 5) -> list[WorkoutHistoryResponse]:
        return self.get_all(owner_id, limit=limit)

    def get(self, owner_id: str, record_id: int) -> WorkoutHistoryResponse:
        record = self.repository.get_by_id(record_id)
        if not record or record.owner_id != owner_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found", )
        return WorkoutHistoryResponse.from_record(record)

    def for_week(self, owner_id: str, week_start: datetime.date) -> list[WorkoutHistoryResponse]:
        records = workouts_for_week(self.session, owner_id, week_start, self.tz_name)
        return [WorkoutHistoryResponse.from_record(r) for r in records]
