"""
History commit service.

Turns a finished session into an immutable ``WorkoutHistory`` row and
then counts the workout towards the owner's streak:

1. ``duration_seconds = floor(ended_at - started_at)``; negative
   durations are rejected with :class:`InvalidDurationError`.
2. The record is written with a server-assigned ``created_at``.  Storage
   failures surface as :class:`CommitFailedError`.
3. The streak is updated in its own database session.  A failure here
   is logged and does not undo step 2: history is the source of truth
   and the streak can be rebuilt with ``recompute_streak``.
4. The new record id is returned.
"""

import datetime
import logging
import math
from typing import Callable

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.db.repositories.workout_history import WorkoutHistoryRepository
from app.models.workout_history import WorkoutHistory
from app.schemas.workout_session import WorkoutSession
from app.workout.clock import local_day
from app.workout.errors import CommitFailedError, InvalidDurationError
from app.workout.streaks import record_workout

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]


def compute_duration(started_at: datetime.datetime, ended_at: datetime.datetime) -> int:
    """Whole seconds between the two instants.

    Raises:
        InvalidDurationError: If *ended_at* lies before *started_at*.
    """
    seconds = math.floor((ended_at - started_at).total_seconds())
    if seconds < 0:
        raise InvalidDurationError(f"Workout ends before it starts ({started_at} > {ended_at})")
    return seconds


class HistoryCommitService:
    """Writes finished sessions to the history table."""

    def __init__(self, session_factory: SessionFactory, tz_name: str = "UTC"):
        self._session_factory = session_factory
        self._tz_name = tz_name

    async def commit(self, owner_id: str, session: WorkoutSession, started_at: datetime.datetime,
                     ended_at: datetime.datetime, ) -> int:
        duration = compute_duration(started_at, ended_at)
        record_id = await run_in_threadpool(self._write_record, owner_id, session, started_at, ended_at, duration)
        await run_in_threadpool(self._update_streak, owner_id, started_at)
        return record_id

    def _write_record(self, owner_id: str, session: WorkoutSession, started_at: datetime.datetime,
                      ended_at: datetime.datetime, duration: int, ) -> int:
        record = WorkoutHistory(owner_id=owner_id, routine_id=session.source_routine_id,
                                routine_name=session.source_routine_name, category=session.category.value,
                                started_at=started_at, ended_at=ended_at, duration_seconds=duration,
                                exercises=[exercise.model_dump(mode="json") for exercise in session.exercises], )
        try:
            with self._session_factory() as db:
                record = WorkoutHistoryRepository(db).create(record)
                return record.id
        except SQLAlchemyError as exc:
            raise CommitFailedError(f"Failed to save workout: {exc.__class__.__name__}") from exc

    def _update_streak(self, owner_id: str, started_at: datetime.datetime) -> None:
        try:
            with self._session_factory() as db:
                record_workout(db, owner_id, local_day(started_at, self._tz_name))
        except Exception:
            logger.exception("Streak update failed for %s; history record kept", owner_id)
