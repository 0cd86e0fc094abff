"""
Workout session schemas.

``WorkoutSession`` is the full state of the single in-progress workout
on this device.  It is the value the session store hands out, the
payload of the persisted snapshot and the body of the session API
responses.

Invariant: ``is_active`` ⟺ ``started_at is not None`` ⟺ ``exercises``
is non-empty.  When ``is_active`` is false every field other than
``restore_attempted`` holds its default (see :meth:`WorkoutSession.idle`).
"""

import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field

from app.schemas.routine import WorkoutCategory

Number = Union[int, float]


class SetField(str, Enum):
    """Editable fields of a :class:`SessionSet`."""

    TARGET_REPS = "target_reps"
    TARGET_WEIGHT = "target_weight"
    COMPLETED = "completed"


class SessionSet(BaseModel):
    """Working values of one set, copied from the routine at start."""

    target_reps: Number = 0
    target_weight: Number = 0
    completed: bool = False


class SessionExercise(BaseModel):
    """One exercise instance within the session."""

    exercise_id: str
    exercise_name: str
    sets: list[SessionSet] = Field(default_factory=list)


class WorkoutSession(BaseModel):
    """The live workout."""

    is_active: bool = False
    restore_attempted: bool = False
    owner_id: Optional[str] = None

    # Copied from the routine at start; never re-fetched
    source_routine_id: Optional[int] = None
    source_routine_name: Optional[str] = None
    category: Optional[WorkoutCategory] = None

    started_at: Optional[datetime.datetime] = None
    elapsed_seconds: int = 0
    exercises: list[SessionExercise] = Field(default_factory=list)

    saving: bool = False
    last_error: Optional[str] = None

    @classmethod
    def idle(cls, restore_attempted: bool = False) -> "WorkoutSession":
        """Idle defaults, keeping only the lifetime ``restore_attempted`` flag."""
        return cls(restore_attempted=restore_attempted)


class SessionProgress(BaseModel):
    """Derived completion counters of a session."""

    completed_sets: int = 0
    total_sets: int = 0
    percentage: float = Field(0.0, ge=0.0, le=100.0)


# ----------------------------------------------------------------------
# API request/response schemas
# ----------------------------------------------------------------------


class StartWorkoutRequest(BaseModel):
    routine_id: int = Field(..., description="Routine to start the workout from")


class SetUpdateRequest(BaseModel):
    """Overwrite one field of one set."""

    field: SetField
    value: Union[bool, int, float]


class WorkoutSessionResponse(BaseModel):
    """Session state plus derived progress and a formatted timer."""

    session: WorkoutSession
    progress: SessionProgress
    elapsed_display: str


class FinishWorkoutResponse(WorkoutSessionResponse):
    finished: bool
    history_id: Optional[int] = None
