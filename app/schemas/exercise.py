"""
Exercise catalog schemas.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ExerciseCategory(str, Enum):
    PUSH = "Push"
    PULL = "Pull"
    LEGS = "Legs"
    CORE = "Core"


class Equipment(str, Enum):
    BARBELL = "Barbell"
    DUMBBELL = "Dumbbell"
    CABLE = "Cable"
    MACHINE = "Machine"
    BODYWEIGHT = "Bodyweight"
    OTHER = "Other"


class ExerciseResponse(BaseModel):
    """Schema for a catalog exercise in API responses."""

    id: str
    name: str
    category: ExerciseCategory
    muscle_groups: list[str] = Field(default_factory=list)
    equipment: Equipment

    class Config:
        from_attributes = True
