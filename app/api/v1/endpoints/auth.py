"""
Identity and profile endpoints.

Sign-in happens at the OAuth provider; this service only verifies its
tokens.  The first authenticated call creates the profile.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_user, get_runtime
from app.db.session import get_db
from app.models.user import User
from app.schemas.user import UserResponse, UserUpdate
from app.services.user_service import UserService
from app.workout.runtime import WorkoutRuntime

router = APIRouter()


@router.get("/me", summary="Get the signed-in profile with its streak.", response_model=UserResponse)
def read_current_user(user: User = Depends(get_current_user)):
    return user


@router.patch("/me", summary="Update body metrics and preferences.", response_model=UserResponse)
def update_current_user(data: UserUpdate, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    """
    Update weight, height, unit preference or weekly goal.

    Streak fields are derived and cannot be set here.
    """
    service = UserService(db)
    return service.update_profile(user, data)


@router.post("/sign-out", summary="Forget the signed-in identity on this device.",
             status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(runtime: WorkoutRuntime = Depends(get_runtime)):
    """
    Report that no identity is signed in.

    An active workout stays in memory.  Restore runs once per process,
    so signing in again does not reload the snapshot.
    """
    runtime.report_identity(None)
    if runtime.cache is not None:
        runtime.cache.clear()
