"""Business logic services."""

from app.services.user_service import UserService
from app.services.exercise_service import ExerciseService
from app.services.routine_service import RoutineService
from app.services.history_service import HistoryService

__all__ = [
    "UserService",
    "ExerciseService",
    "RoutineService",
    "HistoryService",
]
