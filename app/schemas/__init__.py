"""Pydantic schemas for request/response validation."""

from app.schemas.user import Identity, StreakResponse, UnitPreference, UserResponse, UserUpdate
from app.schemas.routine import (
    Intensity,
    RoutineCreate,
    RoutineExercise,
    RoutineResponse,
    RoutineUpdate,
    WorkoutCategory,
)
from app.schemas.workout_session import (
    FinishWorkoutResponse,
    SessionExercise,
    SessionProgress,
    SessionSet,
    SetField,
    SetUpdateRequest,
    StartWorkoutRequest,
    WorkoutSession,
    WorkoutSessionResponse,
)
from app.schemas.workout_history import WorkoutHistoryResponse
from app.schemas.stats import DailyStats, WeeklyStats

__all__ = [
    "Identity",
    "StreakResponse",
    "UnitPreference",
    "UserResponse",
    "UserUpdate",
    "Intensity",
    "RoutineCreate",
    "RoutineExercise",
    "RoutineResponse",
    "RoutineUpdate",
    "WorkoutCategory",
    "FinishWorkoutResponse",
    "SessionExercise",
    "SessionProgress",
    "SessionSet",
    "SetField",
    "SetUpdateRequest",
    "StartWorkoutRequest",
    "WorkoutSession",
    "WorkoutSessionResponse",
    "WorkoutHistoryResponse",
    "DailyStats",
    "WeeklyStats",
]
