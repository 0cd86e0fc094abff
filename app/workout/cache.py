"""
Warm cache of the signed-in owner's routines and recent workouts.

Filled when the identity changes and nudged when a workout finishes.
Nothing in the session state machine depends on it.
"""

import logging
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.db.repositories.routine import RoutineRepository
from app.db.repositories.workout_history import WorkoutHistoryRepository
from app.schemas.routine import RoutineResponse
from app.schemas.workout_history import WorkoutHistoryResponse

logger = logging.getLogger(__name__)


class UserDataCache:
    """Routines and most recent history entries of one owner."""

    def __init__(self, session_factory: Callable[[], Session], recent_limit: int = 5):
        self._session_factory = session_factory
        self.recent_limit = recent_limit
        self.owner_id: Optional[str] = None
        self.routines: list[RoutineResponse] = []
        self.recent_workouts: list[WorkoutHistoryResponse] = []

    def preload(self, owner_id: str) -> None:
        self.clear()
        self.owner_id = owner_id
        try:
            with self._session_factory() as db:
                routines = RoutineRepository(db).get_all_by_owner(owner_id)
                recent = WorkoutHistoryRepository(db).get_by_owner(owner_id, limit=self.recent_limit)
                self.routines = [RoutineResponse.model_validate(routine) for routine in routines]
                self.recent_workouts = [WorkoutHistoryResponse.from_record(record) for record in recent]
        except SQLAlchemyError:
            logger.exception("Preloading data for %s failed", owner_id)
            return
        logger.info("Preloaded %d routines and %d recent workouts for %s", len(self.routines),
                    len(self.recent_workouts), owner_id)

    def add_workout(self, record_id: int) -> None:
        """Put a freshly committed record at the front of the recent list."""
        try:
            with self._session_factory() as db:
                record = WorkoutHistoryRepository(db).get_by_id(record_id)
                if record is None or record.owner_id != self.owner_id:
                    return
                entry = WorkoutHistoryResponse.from_record(record)
        except SQLAlchemyError:
            logger.exception("Caching workout %s failed", record_id)
            return
        self.recent_workouts = [entry, *self.recent_workouts][:self.recent_limit]

    def clear(self) -> None:
        self.owner_id = None
        self.routines = []
        self.recent_workouts = []
