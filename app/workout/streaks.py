"""
Workout streaks: consecutive calendar days with at least one workout.

The streak columns of a profile (``current_streak``, ``longest_streak``,
``last_workout_date``) are a derived cache.  Two ways keep it current:

1. **Incremental**: :func:`record_workout` is called after each history
   commit with the workout's local day:

   - same day as ``last_workout_date`` → unchanged (idempotent),
   - the day after → ``current_streak + 1``,
   - any other day, or no previous workout → ``1``.

   ``longest_streak`` is ``max(longest_streak, current_streak)``.

2. **Recomputation**: :func:`recompute_streak` rebuilds the cache from
   the full history, repairing it if an incremental update was lost.

Both bucket a workout by the local calendar day of its ``started_at``.
"""

from __future__ import annotations

import datetime
import logging
from typing import Iterable, NamedTuple, Optional

from sqlmodel import Session

from app.db.repositories.user import UserRepository
from app.db.repositories.workout_history import WorkoutHistoryRepository
from app.models.user import User
from app.workout.clock import local_day

logger = logging.getLogger(__name__)


class StreakState(NamedTuple):
    current_streak: int
    longest_streak: int
    last_workout_date: Optional[datetime.date]


# ======================================================================
# Pure transitions
# ======================================================================


def advance_streak(state: StreakState, today: datetime.date) -> StreakState:
    """Apply one workout on *today* to *state*."""
    last = state.last_workout_date
    if last == today:
        return state
    if last is not None and last == today - datetime.timedelta(days=1):
        current = state.current_streak + 1
    else:
        current = 1
    return StreakState(current_streak=current, longest_streak=max(state.longest_streak, current),
                       last_workout_date=today, )


def streak_from_days(days: Iterable[datetime.date], as_of: datetime.date) -> StreakState:
    """Rebuild the streak aggregate from the set of workout days.

    ``longest_streak`` is the longest run of consecutive days.  The
    current streak is the run ending at the last workout day, kept only
    while that day is *as_of* or the day before.
    """
    ordered = sorted(set(days))
    if not ordered:
        return StreakState(current_streak=0, longest_streak=0, last_workout_date=None)

    longest = 0
    run = 0
    previous: Optional[datetime.date] = None
    for day in ordered:
        if previous is not None and day == previous + datetime.timedelta(days=1):
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        previous = day

    last = ordered[-1]
    current = run if (as_of - last).days <= 1 else 0
    return StreakState(current_streak=current, longest_streak=longest, last_workout_date=last)


# ======================================================================
# Persistence
# ======================================================================


def _state_of(user: User) -> StreakState:
    return StreakState(current_streak=user.current_streak or 0, longest_streak=user.longest_streak or 0,
                       last_workout_date=user.last_workout_date, )


def _store_state(repo: UserRepository, user: User, state: StreakState) -> User:
    user.current_streak = state.current_streak
    user.longest_streak = state.longest_streak
    user.last_workout_date = state.last_workout_date
    user.updated_at = datetime.datetime.utcnow()
    return repo.update(user)


def record_workout(session: Session, owner_id: str, day: datetime.date) -> Optional[User]:
    """Count a workout on *day* towards the owner's streak.

    Args:
        session: Database session.
        owner_id: Profile id.
        day: Local calendar day of the workout.  A datetime is
            truncated to its date.

    Returns:
        The updated profile, or ``None`` if the owner has no profile.
    """
    if isinstance(day, datetime.datetime):
        day = day.date()

    repo = UserRepository(session)
    user = repo.get_by_id(owner_id)
    if user is None:
        logger.warning("No profile for %s; streak not updated", owner_id)
        return None

    before = _state_of(user)
    after = advance_streak(before, day)
    if after == before:
        return user

    logger.info("Streak for %s: %d → %d (longest %d)", owner_id, before.current_streak, after.current_streak,
                after.longest_streak)
    return _store_state(repo, user, after)


def recompute_streak(session: Session, owner_id: str, as_of: datetime.date,
                     tz_name: str = "UTC", ) -> Optional[User]:
    """Rebuild the owner's streak aggregate from their whole history."""
    repo = UserRepository(session)
    user = repo.get_by_id(owner_id)
    if user is None:
        return None

    started = WorkoutHistoryRepository(session).get_started_times(owner_id)
    state = streak_from_days((local_day(instant, tz_name) for instant in started), as_of)
    logger.info("Streak for %s recomputed from %d workouts: current %d, longest %d", owner_id, len(started),
                state.current_streak, state.longest_streak)
    return _store_state(repo, user, state)
