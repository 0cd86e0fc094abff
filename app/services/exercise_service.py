"""
Exercise catalog service.

Read-only access to the shared catalog routines pick exercises from.
"""

from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.exercise import ExerciseRepository
from app.schemas.exercise import ExerciseCategory, ExerciseResponse


class ExerciseService:
    def __init__(self, session: Session):
        self.repository = ExerciseRepository(session)

    def get_all(self, category: Optional[ExerciseCategory] = None) -> list[ExerciseResponse]:
        exercises = self.repository.get_all(category.value if category is not None else None)
        return [ExerciseResponse.model_validate(exercise) for exercise in exercises]

    def get(self, exercise_id: str) -> ExerciseResponse:
        exercise = self.repository.get_by_id(exercise_id)
        if exercise is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found", )
        return ExerciseResponse.model_validate(exercise)
