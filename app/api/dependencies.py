"""
Shared API dependencies.

Reusable FastAPI dependencies for identity, database access and the
per-process workout runtime.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlmodel import Session

from app.core.security import bearer_scheme, decode_identity_token
from app.db.session import get_db
from app.models.user import User
from app.schemas.user import Identity
from app.services.user_service import UserService
from app.workout.runtime import WorkoutRuntime


def get_runtime(request: Request) -> WorkoutRuntime:
    """The workout runtime created at application startup."""
    return request.app.state.workout_runtime


def get_optional_identity(
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)) -> Optional[Identity]:
    """Decode the bearer token if one is sent."""
    if credentials is None:
        return None
    identity = decode_identity_token(credentials.credentials)
    if identity is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    return identity


async def get_current_identity(identity: Optional[Identity] = Depends(get_optional_identity),
                               runtime: WorkoutRuntime = Depends(get_runtime), ) -> Identity:
    """Require an identity and report it to the workout runtime."""
    runtime.report_identity(identity)
    if identity is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    return identity


def get_current_user(identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db), ) -> User:
    """Profile of the signed-in identity, created on first sight."""
    return UserService(db).ensure_profile(identity)
