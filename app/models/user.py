"""
User database model.

One profile row per identity.  The id is the opaque identifier issued by
the OAuth provider.  The streak columns form a derived cache written
only by the streak calculator.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """
    User profile with its streak aggregate.
    """
    __tablename__ = "users"

    id: str = Field(primary_key=True, max_length=128)
    email: str = Field(default="", max_length=255, index=True)
    display_name: str = Field(default="User", max_length=255)
    photo_url: Optional[str] = Field(default=None, max_length=1024)

    # Body metrics and preferences
    weight: Optional[float] = Field(default=None)
    height: Optional[float] = Field(default=None)
    unit_preference: str = Field(default="kg", max_length=3)
    weekly_goal: int = Field(default=4)

    # Streak aggregate
    current_streak: int = Field(default=0)
    longest_streak: int = Field(default=0)
    last_workout_date: Optional[datetime.date] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
