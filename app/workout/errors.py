"""
Workout session error taxonomy.

User-triggered failures (a commit that could not be written) are caught
by the session store and surfaced through ``last_error``.  Contract
violations (bad indices, finishing an idle session) propagate to the
caller.
"""


class WorkoutError(Exception):
    """Base class for every error raised by the workout core."""


class InvalidRoutineError(WorkoutError):
    """A workout was started from a routine without exercises."""


class IncompleteSessionError(WorkoutError):
    """``finish`` was called on an idle or malformed session."""


class InvalidDurationError(WorkoutError):
    """The end of a workout lies before its start (clock anomaly)."""


class CommitFailedError(WorkoutError):
    """The history record could not be written."""


class SetIndexError(WorkoutError, IndexError):
    """An exercise or set index outside the current exercise list."""


class InvalidSetValueError(WorkoutError, TypeError):
    """A set field was given a value of the wrong type."""
