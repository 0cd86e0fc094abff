"""
Volume/set/rep aggregates over workout history.

Windows select records by the local calendar day of ``started_at``:
a day is ``[local midnight, next local midnight)`` and a week is seven
such days from its Monday.  The fold counts **completed sets only**;
``workout_count`` is the number of matched records.
"""

import datetime
import math
from typing import Iterable, Union

from sqlmodel import Session

from app.db.repositories.workout_history import WorkoutHistoryRepository
from app.models.workout_history import WorkoutHistory
from app.schemas.stats import DailyStats, WeeklyStats
from app.workout.clock import local_day, local_day_bounds

Number = Union[int, float]


# ======================================================================
# Pure fold
# ======================================================================


class SetTotals:
    """Running totals over completed sets."""

    def __init__(self) -> None:
        self.volume: float = 0.0
        self.sets: int = 0
        self.reps: Number = 0

    def add_record(self, exercises: Iterable[dict]) -> None:
        for exercise in exercises:
            for session_set in exercise.get("sets", []):
                if not session_set.get("completed"):
                    continue
                reps = session_set.get("target_reps") or 0
                weight = session_set.get("target_weight") or 0
                self.volume += weight * reps
                self.sets += 1
                self.reps += reps

    @property
    def rounded_volume(self) -> int:
        """Volume rounded half up to a whole number."""
        return int(math.floor(self.volume + 0.5))


def fold_records(records: Iterable[WorkoutHistory]) -> SetTotals:
    totals = SetTotals()
    for record in records:
        totals.add_record(record.exercises or [])
    return totals


# ======================================================================
# Windows
# ======================================================================


def compute_daily_stats(session: Session, owner_id: str, day: datetime.date, tz_name: str = "UTC") -> DailyStats:
    start, end = local_day_bounds(day, tz_name)
    records = WorkoutHistoryRepository(session).get_by_started_range(owner_id, start, end)
    totals = fold_records(records)
    return DailyStats(date=day, total_volume=totals.rounded_volume, total_sets=totals.sets,
                      total_reps=totals.reps, workout_count=len(records), )


def workouts_for_week(session: Session, owner_id: str, week_start: datetime.date,
                      tz_name: str = "UTC", ) -> list[WorkoutHistory]:
    """Records whose workout day lies in the seven days from *week_start*, newest first."""
    start, end = local_day_bounds(week_start, tz_name, days=7)
    return WorkoutHistoryRepository(session).get_by_started_range(owner_id, start, end)


def compute_weekly_stats(session: Session, owner_id: str, week_start: datetime.date,
                         tz_name: str = "UTC", ) -> WeeklyStats:
    records = workouts_for_week(session, owner_id, week_start, tz_name)
    totals = fold_records(records)
    workout_dates = sorted({local_day(record.started_at, tz_name) for record in records})
    return WeeklyStats(week_start=week_start, total_volume=totals.rounded_volume, total_sets=totals.sets,
                       total_reps=totals.reps, workout_count=len(records), workout_dates=workout_dates, )
