"""
Workout session store: the state machine of the live workout.

The store owns the single :class:`WorkoutSession` of this device.  Every
operation is a synchronous state transition that replaces the state
with a new value and returns it, except :meth:`WorkoutSessionStore.finish`
which awaits the history commit.

Lifecycle
---------

::

    idle ──start_workout──▶ active ──finish (commit ok)──▶ idle
                              │  ▲
                              │  └── finish (commit failed: last_error set)
                              └──cancel──▶ idle

    idle ──restore(snapshot)──▶ active        (bootstrap only)

Persistence mirroring
---------------------
When the store is given a :class:`SnapshotPersistence`, every applied
transition is mirrored with ``persistence.save(new_state)``.  The mirror
call lives in :meth:`WorkoutSessionStore._apply`, the single place the
state is replaced, so no transition goes unmirrored.

Time
----
``elapsed_seconds`` is always recomputed from the absolute
``started_at``; ticks that are delayed, skipped or duplicated cannot
make it drift.
"""

from __future__ import annotations

import logging
import numbers
from typing import TYPE_CHECKING, Any, Optional, Protocol

from app.schemas.routine import RoutineResponse
from app.schemas.workout_session import (SessionExercise, SessionProgress, SessionSet, SetField,
                                         WorkoutSession, )
from app.workout.clock import Clock, utcnow
from app.workout.errors import (IncompleteSessionError, InvalidRoutineError, InvalidSetValueError,
                                SetIndexError, )

if TYPE_CHECKING:
    import datetime

    from app.workout.persistence import SnapshotPersistence

logger = logging.getLogger(__name__)

# Fields that must be present before a session can be committed.
_REQUIRED_FOR_FINISH = ("owner_id", "source_routine_id", "source_routine_name", "category", "started_at", )


class HistoryCommitter(Protocol):
    """Writes a finished session to history and returns the record id."""

    async def commit(self, owner_id: str, session: WorkoutSession, started_at: datetime.datetime,
                     ended_at: datetime.datetime, ) -> int:
        ...


def compute_progress(exercises: list[SessionExercise]) -> SessionProgress:
    """Count completed and total sets.  Percentage is 0 for an empty list."""
    completed = 0
    total = 0
    for exercise in exercises:
        for session_set in exercise.sets:
            total += 1
            if session_set.completed:
                completed += 1
    percentage = (completed / total) * 100 if total > 0 else 0.0
    return SessionProgress(completed_sets=completed, total_sets=total, percentage=percentage)


class WorkoutSessionStore:
    """Single-writer container of the device's workout session."""

    def __init__(self, committer: HistoryCommitter, persistence: Optional[SnapshotPersistence] = None,
                 clock: Clock = utcnow, ):
        self._committer = committer
        self._persistence = persistence
        self._clock = clock
        self._state = WorkoutSession.idle()
        self._progress_cache: Optional[tuple[list[SessionExercise], SessionProgress]] = None

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def state(self) -> WorkoutSession:
        return self._state

    @property
    def progress(self) -> SessionProgress:
        """Progress of the current exercises, memoised on the list object."""
        exercises = self._state.exercises
        if self._progress_cache is None or self._progress_cache[0] is not exercises:
            self._progress_cache = (exercises, compute_progress(exercises))
        return self._progress_cache[1]

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start_workout(self, owner_id: str, routine: RoutineResponse) -> WorkoutSession:
        """Start a fresh session from a routine snapshot.

        Each routine exercise expands into ``sets`` working sets
        initialised to the routine's reps/weight.

        Raises:
            InvalidRoutineError: If the routine has no exercises.
        """
        if not routine.exercises:
            raise InvalidRoutineError(f"Routine '{routine.name}' has no exercises")

        exercises = [
            SessionExercise(exercise_id=exercise.exercise_id, exercise_name=exercise.exercise_name,
                            sets=[SessionSet(target_reps=exercise.reps, target_weight=exercise.weight)
                                  for _ in range(exercise.sets)], )
            for exercise in routine.exercises
        ]
        started = WorkoutSession(is_active=True, restore_attempted=self._state.restore_attempted,
                                 owner_id=owner_id, source_routine_id=routine.id,
                                 source_routine_name=routine.name, category=routine.category,
                                 started_at=self._clock(), elapsed_seconds=0, exercises=exercises, )
        logger.info("Workout started for %s from routine %s (%d exercises)", owner_id, routine.id,
                    len(exercises))
        return self._apply(started)

    def toggle_set_complete(self, exercise_index: int, set_index: int) -> WorkoutSession:
        """Flip the ``completed`` flag of exactly one set.

        Raises:
            SetIndexError: If either index is outside the exercise list.
        """
        self._locate(self._state.exercises, exercise_index, set_index)
        exercises = self._copy_exercises()
        target = exercises[exercise_index].sets[set_index]
        target.completed = not target.completed
        return self._apply(self._state.model_copy(update={"exercises": exercises}))

    def update_set(self, exercise_index: int, set_index: int, field: SetField | str,
                   value: Any, ) -> WorkoutSession:
        """Overwrite ``target_reps``, ``target_weight`` or ``completed`` on one set.

        Any number is accepted for reps/weight, including zero and
        fractions.  Range checks belong to the caller.

        Raises:
            SetIndexError: If either index is outside the exercise list.
            InvalidSetValueError: If *value* has the wrong type for *field*.
            ValueError: If *field* is not an editable set field.
        """
        field = SetField(field)
        if field is SetField.COMPLETED:
            if not isinstance(value, bool):
                raise InvalidSetValueError(f"'completed' expects a boolean, got {value!r}")
        elif isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidSetValueError(f"'{field.value}' expects a number, got {value!r}")

        self._locate(self._state.exercises, exercise_index, set_index)
        exercises = self._copy_exercises()
        setattr(exercises[exercise_index].sets[set_index], field.value, value)
        return self._apply(self._state.model_copy(update={"exercises": exercises}))

    def tick(self) -> WorkoutSession:
        """Recompute ``elapsed_seconds`` from ``started_at``.  No-op while idle."""
        state = self._state
        if not state.is_active or state.started_at is None:
            return state
        elapsed = max(0, int((self._clock() - state.started_at).total_seconds()))
        if elapsed == state.elapsed_seconds:
            return state
        return self._apply(state.model_copy(update={"elapsed_seconds": elapsed}))

    async def finish(self) -> Optional[int]:
        """Commit the session to history.

        On success the session resets to idle and the new history id is
        returned.  On a failed commit the session stays active with
        ``saving=False`` and ``last_error`` set, and ``None`` is returned
        so the user can retry without losing logged sets.

        Raises:
            IncompleteSessionError: If the session is idle, missing
                required data, or already being saved.  State is left
                unchanged.
        """
        state = self._state
        if not state.is_active:
            raise IncompleteSessionError("No active workout to finish")
        missing = [name for name in _REQUIRED_FOR_FINISH if getattr(state, name) is None]
        if missing:
            raise IncompleteSessionError(f"Missing required workout data: {', '.join(missing)}")
        if state.saving:
            raise IncompleteSessionError("Workout is already being saved")

        saving = self._apply(state.model_copy(update={"saving": True, "last_error": None}))
        ended_at = self._clock()
        snapshot = saving.model_copy(deep=True)

        try:
            record_id = await self._committer.commit(snapshot.owner_id, snapshot, snapshot.started_at, ended_at)
        except Exception as exc:
            message = str(exc) or "Failed to save workout"
            logger.warning("Finishing workout for %s failed: %s", snapshot.owner_id, message)
            if self._is_same_session(saving):
                self._apply(self._state.model_copy(update={"saving": False, "last_error": message}))
            return None

        logger.info("Workout finished for %s as history record %s", snapshot.owner_id, record_id)
        if self._is_same_session(saving):
            self._apply(WorkoutSession.idle(restore_attempted=self._state.restore_attempted))
        return record_id

    def cancel(self) -> WorkoutSession:
        """Discard the session without writing history.  No-op while idle."""
        if not self._state.is_active:
            return self._state
        logger.info("Workout cancelled for %s", self._state.owner_id)
        return self._apply(WorkoutSession.idle(restore_attempted=self._state.restore_attempted))

    def restore(self, snapshot: WorkoutSession) -> WorkoutSession:
        """Replace the whole session with a persisted one (bootstrap only)."""
        restored = snapshot.model_copy(update={"restore_attempted": True, "saving": False})
        logger.info("Workout restored for %s (started %s)", restored.owner_id, restored.started_at)
        return self._apply(restored)

    def mark_restore_attempted(self) -> WorkoutSession:
        if self._state.restore_attempted:
            return self._state
        return self._apply(self._state.model_copy(update={"restore_attempted": True}))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _apply(self, new_state: WorkoutSession) -> WorkoutSession:
        """Replace the state and mirror it to persistence."""
        self._state = new_state
        if self._persistence is not None:
            self._persistence.save(new_state)
        return new_state

    def _copy_exercises(self) -> list[SessionExercise]:
        return [exercise.model_copy(deep=True) for exercise in self._state.exercises]

    def _is_same_session(self, other: WorkoutSession) -> bool:
        current = self._state
        return (current.is_active and current.owner_id == other.owner_id
                and current.started_at == other.started_at)

    @staticmethod
    def _locate(exercises: list[SessionExercise], exercise_index: int, set_index: int) -> SessionSet:
        if not 0 <= exercise_index < len(exercises):
            raise SetIndexError(f"Exercise index {exercise_index} out of range (0..{len(exercises) - 1})")
        sets = exercises[exercise_index].sets
        if not 0 <= set_index < len(sets):
            raise SetIndexError(f"Set index {set_index} out of range for exercise {exercise_index} "
                                f"(0..{len(sets) - 1})")
        return sets[set_index]
