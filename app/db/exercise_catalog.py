"""
Built-in exercise catalog.

Routines reference exercises by ``exercise_id``; this table lists the
ids the catalog ships with.  :func:`seed_exercises` stores the entries
that are not in the database yet, so running it again is harmless and
never overwrites an edited row.

To add an exercise, append it to ``_EXERCISES``.
"""

from __future__ import annotations

import logging

from sqlmodel import Session

from app.db.repositories.exercise import ExerciseRepository
from app.models.exercise import Exercise
from app.schemas.exercise import Equipment, ExerciseCategory

logger = logging.getLogger(__name__)

# Aliases for brevity in the table below
PUSH = ExerciseCategory.PUSH
PULL = ExerciseCategory.PULL
LEGS = ExerciseCategory.LEGS
CORE = ExerciseCategory.CORE
BB = Equipment.BARBELL
DB = Equipment.DUMBBELL
CB = Equipment.CABLE
MC = Equipment.MACHINE
BW = Equipment.BODYWEIGHT

# ======================================================================
# Built-in exercises
# ======================================================================

# (id, name, category, muscle groups, equipment)
_EXERCISES: list[tuple[str, str, ExerciseCategory, list[str], Equipment]] = [
    # ── Push ──────────────────────────────────────────────────────
    ("bench_press", "Bench Press", PUSH, ["chest", "triceps", "front delts"], BB),
    ("incline_dumbbell_press", "Incline Dumbbell Press", PUSH, ["upper chest", "front delts", "triceps"], DB),
    ("overhead_press", "Overhead Press", PUSH, ["shoulders", "triceps"], BB),
    ("lateral_raise", "Lateral Raise", PUSH, ["side delts"], DB),
    ("cable_fly", "Cable Fly", PUSH, ["chest"], CB),
    ("triceps_pushdown", "Triceps Pushdown", PUSH, ["triceps"], CB),
    ("dips", "Dips", PUSH, ["chest", "triceps"], BW),
    ("push_up", "Push-Up", PUSH, ["chest", "triceps", "front delts"], BW),
    # ── Pull ──────────────────────────────────────────────────────
    ("deadlift", "Deadlift", PULL, ["hamstrings", "glutes", "lower back", "traps"], BB),
    ("barbell_row", "Barbell Row", PULL, ["lats", "upper back", "biceps"], BB),
    ("pull_up", "Pull-Up", PULL, ["lats", "biceps"], BW),
    ("lat_pulldown", "Lat Pulldown", PULL, ["lats", "biceps"], CB),
    ("seated_cable_row", "Seated Cable Row", PULL, ["upper back", "lats", "biceps"], CB),
    ("face_pull", "Face Pull", PULL, ["rear delts", "upper back"], CB),
    ("barbell_curl", "Barbell Curl", PULL, ["biceps"], BB),
    ("hammer_curl", "Hammer Curl", PULL, ["biceps", "forearms"], DB),
    # ── Legs ──────────────────────────────────────────────────────
    ("back_squat", "Back Squat", LEGS, ["quadriceps", "glutes", "hamstrings"], BB),
    ("romanian_deadlift", "Romanian Deadlift", LEGS, ["hamstrings", "glutes"], BB),
    ("leg_press", "Leg Press", LEGS, ["quadriceps", "glutes"], MC),
    ("walking_lunge", "Walking Lunge", LEGS, ["quadriceps", "glutes"], DB),
    ("leg_curl", "Leg Curl", LEGS, ["hamstrings"], MC),
    ("leg_extension", "Leg Extension", LEGS, ["quadriceps"], MC),
    ("calf_raise", "Calf Raise", LEGS, ["calves"], MC),
    # ── Core ──────────────────────────────────────────────────────
    ("plank", "Plank", CORE, ["abs", "obliques"], BW),
    ("hanging_leg_raise", "Hanging Leg Raise", CORE, ["abs", "hip flexors"], BW),
    ("cable_crunch", "Cable Crunch", CORE, ["abs"], CB),
]


def builtin_exercises() -> list[Exercise]:
    """Fresh, unsaved rows for every built-in exercise."""
    return [
        Exercise(id=exercise_id, name=name, category=category.value, muscle_groups=list(muscles),
                 equipment=equipment.value, )
        for exercise_id, name, category, muscles, equipment in _EXERCISES
    ]


def seed_exercises(session: Session) -> int:
    """Store the built-in exercises missing from the catalog table."""
    added = ExerciseRepository(session).add_missing(builtin_exercises())
    logger.info("Exercise catalog seeded: %d added, %d built in", added, len(_EXERCISES))
    return added
