"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.exercise import ExerciseRepository
from app.db.repositories.routine import RoutineRepository
from app.db.repositories.workout_history import WorkoutHistoryRepository

__all__ = [
    "UserRepository",
    "ExerciseRepository",
    "RoutineRepository",
    "WorkoutHistoryRepository",
]
