"""
Routine database model.

Exercises are stored as a JSON list of
``{exercise_id, exercise_name, sets, reps, weight}`` objects, validated
by :class:`app.schemas.routine.RoutineExercise` at the service layer.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class Routine(SQLModel, table=True):
    """A reusable workout template owned by one user."""

    __tablename__ = "routines"

    id: Optional[int] = Field(default=None, primary_key=True)
    owner_id: str = Field(foreign_key="users.id", nullable=False, index=True, max_length=128)

    name: str = Field(nullable=False, max_length=200)
    category: str = Field(nullable=False, max_length=20)
    intensity: str = Field(default="Medium", nullable=False, max_length=20)
    estimated_duration: int = Field(default=60, nullable=False)

    exercises: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
