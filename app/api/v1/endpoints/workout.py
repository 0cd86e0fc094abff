"""
Live workout endpoints.

Drive the single workout session of this device.  Only the identity
that started the active session may change it.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.api.dependencies import get_current_identity, get_runtime
from app.db.session import get_db
from app.schemas.user import Identity
from app.schemas.workout_session import (FinishWorkoutResponse, SetUpdateRequest, StartWorkoutRequest,
                                         WorkoutSessionResponse, )
from app.services.routine_service import RoutineService
from app.services.user_service import UserService
from app.workout.clock import format_duration
from app.workout.errors import IncompleteSessionError, InvalidRoutineError, InvalidSetValueError, SetIndexError
from app.workout.runtime import WorkoutRuntime

router = APIRouter()


def _session_response(runtime: WorkoutRuntime) -> WorkoutSessionResponse:
    state = runtime.store.state
    return WorkoutSessionResponse(session=state, progress=runtime.store.progress,
                                  elapsed_display=format_duration(state.elapsed_seconds), )


def _require_owner(runtime: WorkoutRuntime, identity: Identity) -> None:
    state = runtime.store.state
    if state.is_active and state.owner_id != identity.id:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                            detail="The active workout belongs to another user", )


@router.get("", summary="Get the workout session and its progress.", response_model=WorkoutSessionResponse)
async def get_workout(identity: Identity = Depends(get_current_identity),
                      runtime: WorkoutRuntime = Depends(get_runtime), ):
    _require_owner(runtime, identity)
    runtime.store.tick()
    return _session_response(runtime)


@router.post("/start", summary="Start a workout from a routine.", response_model=WorkoutSessionResponse,
             status_code=status.HTTP_201_CREATED, )
async def start_workout(data: StartWorkoutRequest, db: Session = Depends(get_db),
                        identity: Identity = Depends(get_current_identity),
                        runtime: WorkoutRuntime = Depends(get_runtime), ):
    if runtime.store.state.is_active:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="A workout is already in progress")

    UserService(db).ensure_profile(identity)
    routine = RoutineService(db).get_snapshot(identity.id, data.routine_id)
    try:
        runtime.start_workout(identity.id, routine)
    except InvalidRoutineError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return _session_response(runtime)


@router.post("/exercises/{exercise_index}/sets/{set_index}/toggle", summary="Toggle a set's completion.",
             response_model=WorkoutSessionResponse, )
async def toggle_set(exercise_index: int, set_index: int, identity: Identity = Depends(get_current_identity),
                     runtime: WorkoutRuntime = Depends(get_runtime), ):
    _require_owner(runtime, identity)
    try:
        runtime.store.toggle_set_complete(exercise_index, set_index)
    except SetIndexError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return _session_response(runtime)


@router.patch("/exercises/{exercise_index}/sets/{set_index}", summary="Edit reps, weight or completion of a set.",
              response_model=WorkoutSessionResponse, )
async def update_set(exercise_index: int, set_index: int, data: SetUpdateRequest,
                     identity: Identity = Depends(get_current_identity),
                     runtime: WorkoutRuntime = Depends(get_runtime), ):
    _require_owner(runtime, identity)
    try:
        runtime.store.update_set(exercise_index, set_index, data.field, data.value)
    except (SetIndexError, InvalidSetValueError) as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return _session_response(runtime)


@router.post("/finish", summary="Save the workout to history.", response_model=FinishWorkoutResponse)
async def finish_workout(identity: Identity = Depends(get_current_identity),
                         runtime: WorkoutRuntime = Depends(get_runtime), ):
    """
    Commit the active workout.

    A failed save keeps the workout active with ``last_error`` set and
    ``finished`` false; finishing again retries.
    """
    _require_owner(runtime, identity)
    try:
        record_id = await runtime.finish()
    except IncompleteSessionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    response = _session_response(runtime)
    return FinishWorkoutResponse(**response.model_dump(), finished=record_id is not None, history_id=record_id)


@router.post("/cancel", summary="Discard the workout without saving.", response_model=WorkoutSessionResponse)
async def cancel_workout(identity: Identity = Depends(get_current_identity),
                         runtime: WorkoutRuntime = Depends(get_runtime), ):
    _require_owner(runtime, identity)
    await runtime.cancel()
    return _session_response(runtime)
