"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import analytics, auth, exercises, history, routines, workout

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Identity"]
)
api_router.include_router(
    exercises.router, prefix="/exercises", tags=["Exercise catalog"]
)
api_router.include_router(
    routines.router, prefix="/routines", tags=["Routines"]
)
api_router.include_router(
    workout.router, prefix="/workout", tags=["Live workout"]
)
api_router.include_router(
    history.router, prefix="/history", tags=["Workout history"]
)
api_router.include_router(
    analytics.router, prefix="/analytics", tags=["Analytics"]
)
