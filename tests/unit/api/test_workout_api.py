"""API tests for identity, the exercise catalog, routines, the live workout, history and analytics.

The app runs against an in-memory database and a runtime with
in-memory snapshot storage; both replace the production dependencies.
"""

import datetime

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from app.api.dependencies import get_runtime
from app.core.security import create_identity_token
from app.db.exercise_catalog import builtin_exercises, seed_exercises
from app.db.session import get_db
from app.main import app
from app.schemas.user import Identity
from app.workout.persistence import MemoryLocalStorage
from app.workout.runtime import WorkoutRuntime

ROUTINE = {
    "name": "Push Day",
    "category": "Push",
    "intensity": "Heavy",
    "estimated_duration": 45,
    "exercises": [
        {"exercise_id": "bench", "exercise_name": "Bench Press", "sets": 3, "reps": 8, "weight": 60},
        {"exercise_id": "ohp", "exercise_name": "Overhead Press", "sets": 2, "reps": 10, "weight": 30},
    ],
}


def _headers(user_id: str = "user-a", name: str = "Athlete A") -> dict:
    token = create_identity_token(Identity(id=user_id, display_name=name, email=f"{user_id}@example.com"))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def runtime(session_factory, clock):
    return WorkoutRuntime.build(session_factory, MemoryLocalStorage(), timer_interval=10, clock=clock)


@pytest.fixture
def client(engine, runtime):
    def override_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_db
    app.dependency_overrides[get_runtime] = lambda: runtime
    with TestClient(app) as test_client:
        yield test_client
        test_client.portal.call(runtime.shutdown)
    app.dependency_overrides.clear()


@pytest.fixture
def routine_id(client) -> int:
    response = client.post("/api/v1/routines", json=ROUTINE, headers=_headers())
    assert response.status_code == 201
    return response.json()["id"]


# ======================================================================
# Identity / profile
# ======================================================================


class TestIdentity:
    def test_requires_token(self, client):
        assert client.get("/api/v1/auth/me").status_code == 401

    def test_rejects_bad_token(self, client):
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401

    def test_profile_created_on_first_sight(self, client):
        response = client.get("/api/v1/auth/me", headers=_headers())
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == "user-a"
        assert body["display_name"] == "Athlete A"
        assert body["unit_preference"] == "kg"
        assert body["weekly_goal"] == 4
        assert body["current_streak"] == 0

    def test_update_profile(self, client):
        response = client.patch("/api/v1/auth/me", json={"weight": 82.5, "unit_preference": "lbs"},
                                headers=_headers())
        assert response.status_code == 200
        assert response.json()["weight"] == 82.5
        assert response.json()["unit_preference"] == "lbs"

    def test_streak_is_not_editable(self, client):
        client.patch("/api/v1/auth/me", json={"current_streak": 50}, headers=_headers())
        assert client.get("/api/v1/auth/me", headers=_headers()).json()["current_streak"] == 0


# ======================================================================
# Exercise catalog
# ======================================================================


class TestExercises:
    @pytest.fixture(autouse=True)
    def _catalog(self, db):
        seed_exercises(db)

    def test_requires_token(self, client):
        assert client.get("/api/v1/exercises").status_code == 401

    def test_list_and_filter(self, client):
        everything = client.get("/api/v1/exercises", headers=_headers()).json()
        assert len(everything) == len(builtin_exercises())

        legs = client.get("/api/v1/exercises", params={"category": "Legs"}, headers=_headers()).json()
        assert legs and all(exercise["category"] == "Legs" for exercise in legs)

    def test_get_one(self, client):
        response = client.get("/api/v1/exercises/bench_press", headers=_headers())
        assert response.status_code == 200
        assert response.json() == {"id": "bench_press", "name": "Bench Press", "category": "Push",
                                   "muscle_groups": ["chest", "triceps", "front delts"], "equipment": "Barbell"}

    def test_unknown_is_404(self, client):
        assert client.get("/api/v1/exercises/nope", headers=_headers()).status_code == 404


# ======================================================================
# Routines
# ======================================================================


class TestRoutines:
    def test_crud(self, client, routine_id):
        listed = client.get("/api/v1/routines", headers=_headers()).json()
        assert [r["id"] for r in listed] == [routine_id]

        updated = client.put(f"/api/v1/routines/{routine_id}", json={"name": "Heavy Push"}, headers=_headers())
        assert updated.json()["name"] == "Heavy Push"
        assert len(updated.json()["exercises"]) == 2

        assert client.delete(f"/api/v1/routines/{routine_id}", headers=_headers()).status_code == 204
        assert client.get(f"/api/v1/routines/{routine_id}", headers=_headers()).status_code == 404

    def test_other_owner_gets_404(self, client, routine_id):
        response = client.get(f"/api/v1/routines/{routine_id}", headers=_headers("user-b"))
        assert response.status_code == 404

    @pytest.mark.parametrize("patch", [{"sets": 0}, {"reps": -1}, {"weight": -5}])
    def test_invalid_exercise_rejected(self, client, patch):
        exercise = {**ROUTINE["exercises"][0], **patch}
        response = client.post("/api/v1/routines", json={**ROUTINE, "exercises": [exercise]}, headers=_headers())
        assert response.status_code == 422


# ======================================================================
# Live workout
# ======================================================================


class TestWorkoutSession:
    def test_idle_by_default(self, client):
        body = client.get("/api/v1/workout", headers=_headers()).json()
        assert body["session"]["is_active"] is False
        assert body["progress"]["percentage"] == 0
        assert body["elapsed_display"] == "0:00"

    def test_full_workout(self, client, routine_id, runtime, clock):
        started = client.post("/api/v1/workout/start", json={"routine_id": routine_id}, headers=_headers())
        assert started.status_code == 201
        session = started.json()["session"]
        assert [len(e["sets"]) for e in session["exercises"]] == [3, 2]
        assert runtime.timer.running

        client.post("/api/v1/workout/exercises/0/sets/0/toggle", headers=_headers())
        edited = client.patch("/api/v1/workout/exercises/1/sets/1",
                              json={"field": "target_weight", "value": 32.5}, headers=_headers())
        assert edited.json()["session"]["exercises"][1]["sets"][1]["target_weight"] == 32.5
        client.patch("/api/v1/workout/exercises/1/sets/1", json={"field": "completed", "value": True},
                     headers=_headers())

        clock.advance(3725)
        current = client.get("/api/v1/workout", headers=_headers()).json()
        assert current["elapsed_display"] == "1:02:05"
        assert current["progress"]["completed_sets"] == 2
        assert current["progress"]["total_sets"] == 5

        finished = client.post("/api/v1/workout/finish", headers=_headers()).json()
        assert finished["finished"] is True
        assert finished["session"]["is_active"] is False

        record = client.get(f"/api/v1/history/{finished['history_id']}", headers=_headers()).json()
        assert record["duration_seconds"] == 3725
        assert record["duration_display"] == "1:02:05"
        assert record["category"] == "Push"

        profile = client.get("/api/v1/auth/me", headers=_headers()).json()
        assert profile["current_streak"] == 1

    def test_start_while_active_conflicts(self, client, routine_id):
        client.post("/api/v1/workout/start", json={"routine_id": routine_id}, headers=_headers())
        response = client.post("/api/v1/workout/start", json={"routine_id": routine_id}, headers=_headers())
        assert response.status_code == 409

    def test_other_identity_conflicts(self, client, routine_id):
        client.post("/api/v1/workout/start", json={"routine_id": routine_id}, headers=_headers())
        response = client.post("/api/v1/workout/exercises/0/sets/0/toggle", headers=_headers("user-b"))
        assert response.status_code == 409

    def test_empty_routine_rejected(self, client):
        routine = client.post("/api/v1/routines", json={**ROUTINE, "exercises": []}, headers=_headers()).json()
        response = client.post("/api/v1/workout/start", json={"routine_id": routine["id"]}, headers=_headers())
        assert response.status_code == 422

    def test_bad_index_rejected(self, client, routine_id):
        client.post("/api/v1/workout/start", json={"routine_id": routine_id}, headers=_headers())
        response = client.post("/api/v1/workout/exercises/5/sets/0/toggle", headers=_headers())
        assert response.status_code == 422

    def test_wrong_value_type_rejected(self, client, routine_id):
        client.post("/api/v1/workout/start", json={"routine_id": routine_id}, headers=_headers())
        response = client.patch("/api/v1/workout/exercises/0/sets/0", json={"field": "completed", "value": 3},
                                headers=_headers())
        assert response.status_code == 422

    def test_finish_idle_conflicts(self, client):
        assert client.post("/api/v1/workout/finish", headers=_headers()).status_code == 409

    def test_cancel_discards(self, client, routine_id, runtime):
        client.post("/api/v1/workout/start", json={"routine_id": routine_id}, headers=_headers())
        body = client.post("/api/v1/workout/cancel", headers=_headers()).json()
        assert body["session"]["is_active"] is False
        assert client.get("/api/v1/history", headers=_headers()).json() == []
        assert not runtime.timer.running


# ======================================================================
# History and analytics
# ======================================================================


class TestHistoryAndAnalytics:
    def _finish_one(self, client, routine_id, clock, minutes=30):
        client.post("/api/v1/workout/start", json={"routine_id": routine_id}, headers=_headers())
        client.post("/api/v1/workout/exercises/0/sets/0/toggle", headers=_headers())
        clock.advance(minutes * 60)
        return client.post("/api/v1/workout/finish", headers=_headers()).json()["history_id"]

    def test_list_recent_and_filter(self, client, routine_id, clock):
        first = self._finish_one(client, routine_id, clock)
        second = self._finish_one(client, routine_id, clock)

        listed = client.get("/api/v1/history", headers=_headers()).json()
        assert [r["id"] for r in listed] == [second, first]
        assert client.get("/api/v1/history", params={"category": "Legs"}, headers=_headers()).json() == []
        recent = client.get("/api/v1/history/recent", params={"limit": 1}, headers=_headers()).json()
        assert [r["id"] for r in recent] == [second]

    def test_other_owner_cannot_read_record(self, client, routine_id, clock):
        record_id = self._finish_one(client, routine_id, clock)
        assert client.get(f"/api/v1/history/{record_id}", headers=_headers("user-b")).status_code == 404

    def test_stats_and_week(self, client, routine_id, clock):
        self._finish_one(client, routine_id, clock)

        daily = client.get("/api/v1/analytics/stats/daily", params={"day": "2024-01-10"}, headers=_headers())
        assert daily.json() == {"date": "2024-01-10", "total_volume": 480, "total_sets": 1, "total_reps": 8,
                                "workout_count": 1}

        weekly = client.get("/api/v1/analytics/stats/weekly", params={"week_of": "2024-01-12"},
                            headers=_headers()).json()
        assert weekly["week_start"] == "2024-01-08"
        assert weekly["workout_dates"] == ["2024-01-10"]

        week = client.get("/api/v1/history/week", headers=_headers()).json()
        assert len(week) == 1

    def test_streak_endpoints(self, client, routine_id, clock):
        self._finish_one(client, routine_id, clock)
        streak = client.get("/api/v1/analytics/streak", headers=_headers()).json()
        assert streak == {"current_streak": 1, "longest_streak": 1, "last_workout_date": "2024-01-10"}

        rebuilt = client.post("/api/v1/analytics/streak/recompute", headers=_headers()).json()
        assert rebuilt == streak


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"
