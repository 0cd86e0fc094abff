"""
Routine endpoints.

CRUD for the signed-in owner's routines.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.routine import RoutineCreate, RoutineResponse, RoutineUpdate
from app.services.routine_service import RoutineService

router = APIRouter()


@router.get("", summary="List routines, newest first.", response_model=list[RoutineResponse])
def list_routines(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return RoutineService(db).get_all(user.id)


@router.post("", summary="Create a routine.", response_model=RoutineResponse, status_code=status.HTTP_201_CREATED)
def create_routine(data: RoutineCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return RoutineService(db).create(user.id, data)


@router.get("/{routine_id}", summary="Get a routine.", response_model=RoutineResponse)
def get_routine(routine_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return RoutineService(db).get(user.id, routine_id)


@router.put("/{routine_id}", summary="Rename a routine or replace its exercises.", response_model=RoutineResponse)
def update_routine(routine_id: int, data: RoutineUpdate, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    return RoutineService(db).update(user.id, routine_id, data)


@router.delete("/{routine_id}", summary="Delete a routine.", status_code=status.HTTP_204_NO_CONTENT)
def delete_routine(routine_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    RoutineService(db).delete(user.id, routine_id)
