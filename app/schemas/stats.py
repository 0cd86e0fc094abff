"""
Aggregate statistics schemas.

Only completed sets count towards volume, sets and reps.
``workout_count`` is the number of workouts in the window.
"""

import datetime
from typing import Union

from pydantic import BaseModel, Field


class DailyStats(BaseModel):
    """Totals for one local calendar day."""

    date: datetime.date
    total_volume: int = Field(0, description="Sum of weight × reps over completed sets, rounded")
    total_sets: int = 0
    total_reps: Union[int, float] = 0
    workout_count: int = 0


class WeeklyStats(BaseModel):
    """Totals for one Monday-based week."""

    week_start: datetime.date
    total_volume: int = Field(0, description="Sum of weight × reps over completed sets, rounded")
    total_sets: int = 0
    total_reps: Union[int, float] = 0
    workout_count: int = 0
    workout_dates: list[datetime.date] = Field(default_factory=list,
                                               description="Distinct days with at least one workout")
