"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.exercise import Exercise  # noqa: F401
from app.models.routine import Routine  # noqa: F401
from app.models.workout_history import WorkoutHistory  # noqa: F401
