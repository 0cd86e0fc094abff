"""
Routine service.

CRUD for the owner's routines and the snapshot a workout is started
from.  Exercises are validated by :class:`RoutineExercise` at the API
boundary and stored as plain JSON.
"""

import datetime

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.routine import RoutineRepository
from app.models.routine import Routine
from app.schemas.routine import RoutineCreate, RoutineResponse, RoutineUpdate


class RoutineService:
    """Service for routine business logic."""

    def __init__(self, session: Session):
        self.repository = RoutineRepository(session)

    def create(self, owner_id: str, data: RoutineCreate) -> RoutineResponse:
        routine = Routine(owner_id=owner_id, name=data.name, category=data.category.value,
                          intensity=data.intensity.value, estimated_duration=data.estimated_duration,
                          exercises=[exercise.model_dump() for exercise in data.exercises], )
        routine = self.repository.create(routine)
        return RoutineResponse.model_validate(routine)

    def get_all(self, owner_id: str) -> list[RoutineResponse]:
        return [RoutineResponse.model_validate(r) for r in self.repository.get_all_by_owner(owner_id)]

    def get(self, owner_id: str, routine_id: int) -> RoutineResponse:
        return RoutineResponse.model_validate(self._get_owned_routine(owner_id, routine_id))

    def get_snapshot(self, owner_id: str, routine_id: int) -> RoutineResponse:
        """Detached copy of a routine to start a workout from.

        Later edits to the routine do not reach a session started from
        this snapshot.
        """
        return self.get(owner_id, routine_id).model_copy(deep=True)

    def update(self, owner_id: str, routine_id: int, data: RoutineUpdate) -> RoutineResponse:
        routine = self._get_owned_routine(owner_id, routine_id)

        if data.name is not None:
            routine.name = data.name

        if data.exercises is not None:
            routine.exercises = [exercise.model_dump() for exercise in data.exercises]

        routine.updated_at = datetime.datetime.utcnow()
        routine = self.repository.update(routine)
        return RoutineResponse.model_validate(routine)

    def delete(self, owner_id: str, routine_id: int) -> None:
        self._get_owned_routine(owner_id, routine_id)
        self.repository.delete(routine_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_routine(self, owner_id: str, routine_id: int) -> Routine:
        routine = self.repository.get_by_id(routine_id)
        if not routine or routine.owner_id != owner_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Routine not found", )
        return routine
