"""Tests for the built-in exercise catalog and its repository."""

from app.db.exercise_catalog import builtin_exercises, seed_exercises
from app.db.repositories.exercise import ExerciseRepository
from app.models.exercise import Exercise
from app.schemas.exercise import Equipment, ExerciseCategory


class TestBuiltinCatalog:
    def test_ids_are_unique(self):
        ids = [exercise.id for exercise in builtin_exercises()]
        assert len(ids) == len(set(ids))

    def test_values_are_known(self):
        categories = {category.value for category in ExerciseCategory}
        equipment = {item.value for item in Equipment}
        for exercise in builtin_exercises():
            assert exercise.category in categories
            assert exercise.equipment in equipment
            assert exercise.muscle_groups


class TestSeed:
    def test_seed_is_idempotent(self, db):
        total = len(builtin_exercises())

        assert seed_exercises(db) == total
        assert seed_exercises(db) == 0
        assert len(ExerciseRepository(db).get_all()) == total

    def test_seed_keeps_edited_rows(self, db):
        db.add(Exercise(id="bench_press", name="Flat Bench", category="Push", muscle_groups=["chest"],
                        equipment="Barbell"))
        db.commit()

        seed_exercises(db)

        assert ExerciseRepository(db).get_by_id("bench_press").name == "Flat Bench"


class TestRepository:
    def test_filter_by_category_sorted_by_name(self, db):
        seed_exercises(db)

        core = ExerciseRepository(db).get_all("Core")

        assert [exercise.name for exercise in core] == ["Cable Crunch", "Hanging Leg Raise", "Plank"]

    def test_unknown_id(self, db):
        assert ExerciseRepository(db).get_by_id("nope") is None
