"""
Exercise catalog endpoints.

The catalog is shared by every user; reading it needs a signed-in
identity like the rest of the API.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.api.dependencies import get_current_identity
from app.db.session import get_db
from app.schemas.exercise import ExerciseCategory, ExerciseResponse
from app.schemas.user import Identity
from app.services.exercise_service import ExerciseService

router = APIRouter()


@router.get("", summary="List catalog exercises by name.", response_model=list[ExerciseResponse])
def list_exercises(category: Optional[ExerciseCategory] = Query(None, description="Only this category"),
                   db: Session = Depends(get_db), identity: Identity = Depends(get_current_identity), ):
    return ExerciseService(db).get_all(category)


@router.get("/{exercise_id}", summary="Get a catalog exercise.", response_model=ExerciseResponse)
def get_exercise(exercise_id: str, db: Session = Depends(get_db),
                 identity: Identity = Depends(get_current_identity), ):
    return ExerciseService(db).get(exercise_id)
