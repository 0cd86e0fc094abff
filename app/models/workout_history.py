"""
Workout history database model.

A row is written once, when a workout session is finished, and never
updated.  ``started_at`` decides which calendar day the workout counts
for; ``created_at`` is the write time and the sort key of history lists.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class WorkoutHistory(SQLModel, table=True):
    """A completed workout.

    ``routine_id`` is a plain reference, not a foreign key: deleting a
    routine leaves its history intact.
    """

    __tablename__ = "workout_history"

    id: Optional[int] = Field(default=None, primary_key=True)
    owner_id: str = Field(foreign_key="users.id", nullable=False, index=True, max_length=128)

    routine_id: Optional[int] = Field(default=None)
    routine_name: str = Field(nullable=False, max_length=200)
    category: str = Field(nullable=False, max_length=20, index=True)

    started_at: datetime.datetime = Field(nullable=False, index=True)
    ended_at: datetime.datetime = Field(nullable=False)
    duration_seconds: int = Field(nullable=False, ge=0)

    # Finalised exercises, same shape as the session's exercises
    exercises: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )

    # Server-assigned write time
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, index=True)
