"""
User API schemas.

Pydantic models for identity, profile and streak data.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class UnitPreference(str, Enum):
    KG = "kg"
    LBS = "lbs"


class Identity(BaseModel):
    """Signed-in identity reported by the OAuth provider.

    ``id`` is an opaque, stable string.
    """

    id: str = Field(..., min_length=1)
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
    email: Optional[str] = None


# Request schemas
class UserUpdate(BaseModel):
    """Schema for updating the editable profile fields."""
    weight: Optional[float] = Field(None, gt=0, le=1000)
    height: Optional[float] = Field(None, gt=0, le=300)
    unit_preference: Optional[UnitPreference] = None
    weekly_goal: Optional[int] = Field(None, ge=1, le=14)


# Response schemas
class StreakResponse(BaseModel):
    """Streak aggregate of a profile.  Only the streak calculator writes it."""
    current_streak: int
    longest_streak: int
    last_workout_date: Optional[datetime.date]

    class Config:
        from_attributes = True


class UserResponse(StreakResponse):
    """Schema for the profile in API responses."""
    id: str
    display_name: str
    email: str
    photo_url: Optional[str]
    weight: Optional[float]
    height: Optional[float]
    unit_preference: UnitPreference
    weekly_goal: int
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True  # Allows creation from SQLModel objects
