"""
Routine API schemas.

A routine is the reusable template a workout session is started from.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class WorkoutCategory(str, Enum):
    """Workout type a routine belongs to."""

    PUSH = "Push"
    PULL = "Pull"
    LEGS = "Legs"
    UPPER = "Upper"
    LOWER = "Lower"
    FULL_BODY = "FullBody"


class Intensity(str, Enum):
    HEAVY = "Heavy"
    MEDIUM = "Medium"
    LIGHT = "Light"


class RoutineExercise(BaseModel):
    """One exercise of a routine with its configured sets/reps/weight."""

    exercise_id: str = Field(..., min_length=1, max_length=100)
    exercise_name: str = Field(..., min_length=1, max_length=200)
    sets: int = Field(..., ge=1, le=20, description="Number of sets performed in a session")
    reps: int = Field(..., ge=0, description="Target reps per set")
    weight: float = Field(0.0, ge=0, description="Target weight per set")


class RoutineCreate(BaseModel):
    """Schema for creating a routine."""

    name: str = Field(..., min_length=1, max_length=200)
    category: WorkoutCategory
    intensity: Intensity = Intensity.MEDIUM
    estimated_duration: int = Field(60, ge=1, le=600, description="Estimated duration in minutes")
    exercises: list[RoutineExercise] = Field(default_factory=list)


class RoutineUpdate(BaseModel):
    """Schema for updating a routine.  Only name and exercises are editable."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    exercises: Optional[list[RoutineExercise]] = None


class RoutineResponse(BaseModel):
    """Schema for a routine in API responses.

    Also used as the immutable snapshot a workout session is started
    from.
    """

    id: int
    owner_id: str
    name: str
    category: WorkoutCategory
    intensity: Intensity
    estimated_duration: int
    exercises: list[RoutineExercise]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
