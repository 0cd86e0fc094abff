"""Shared fixtures.

The environment is prepared before ``app`` is imported: settings need a
secret, and every test runs against an in-memory SQLite database.
"""

import datetime
import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DEBUG"] = "false"

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.models.user import User
from app.schemas.routine import RoutineExercise, RoutineResponse, WorkoutCategory


class FakeClock:
    """Deterministic clock returning naive UTC instants."""

    def __init__(self, start: datetime.datetime = datetime.datetime(2024, 1, 10, 18, 0, 0)):
        self.now = start

    def __call__(self) -> datetime.datetime:
        return self.now

    def advance(self, seconds: float) -> datetime.datetime:
        self.now = self.now + datetime.timedelta(seconds=seconds)
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return lambda: Session(engine)


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def user(db) -> User:
    profile = User(id="user-a", email="a@example.com", display_name="Athlete A")
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


def make_routine(sets: tuple[int, ...] = (3, 2), routine_id: int = 7, reps: int = 10,
                 weight: float = 50.0) -> RoutineResponse:
    now = datetime.datetime(2024, 1, 1)
    exercises = [
        RoutineExercise(exercise_id=f"ex-{i}", exercise_name=f"Exercise {i}", sets=count, reps=reps, weight=weight)
        for i, count in enumerate(sets)
    ]
    return RoutineResponse(id=routine_id, owner_id="user-a", name="Push Day", category=WorkoutCategory.PUSH,
                           intensity="Medium", estimated_duration=60, exercises=exercises, created_at=now,
                           updated_at=now)


@pytest.fixture
def routine() -> RoutineResponse:
    return make_routine()


@pytest.fixture
def routine_factory():
    return make_routine
