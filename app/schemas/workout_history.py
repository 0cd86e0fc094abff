"""
Workout history API schemas.

History records are immutable once written; there is no update schema.
"""

import datetime
from typing import Optional

from pydantic import BaseModel

from app.models.workout_history import WorkoutHistory
from app.schemas.routine import WorkoutCategory
from app.schemas.workout_session import SessionExercise
from app.workout.clock import format_duration


class WorkoutHistoryResponse(BaseModel):
    """Schema for a completed workout in API responses."""

    id: int
    owner_id: str
    routine_id: Optional[int]
    routine_name: str
    category: WorkoutCategory
    started_at: datetime.datetime
    ended_at: datetime.datetime
    duration_seconds: int
    duration_display: str
    exercises: list[SessionExercise]
    created_at: datetime.datetime

    @classmethod
    def from_record(cls, record: WorkoutHistory) -> "WorkoutHistoryResponse":
        return cls(id=record.id, owner_id=record.owner_id, routine_id=record.routine_id,
                   routine_name=record.routine_name, category=record.category, started_at=record.started_at,
                   ended_at=record.ended_at, duration_seconds=record.duration_seconds,
                   duration_display=format_duration(record.duration_seconds),
                   exercises=[SessionExercise.model_validate(exercise) for exercise in record.exercises or []],
                   created_at=record.created_at, )
