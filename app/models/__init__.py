"""SQLModel database models."""

from app.models.user import User
from app.models.exercise import Exercise
from app.models.routine import Routine
from app.models.workout_history import WorkoutHistory

__all__ = [
    "User",
    "Exercise",
    "Routine",
    "WorkoutHistory",
]
