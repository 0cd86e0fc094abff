"""Tests for the history commit service."""

import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session

from app.db.repositories.workout_history import WorkoutHistoryRepository
from app.models.user import User
from app.schemas.routine import WorkoutCategory
from app.schemas.workout_session import SessionExercise, SessionSet, WorkoutSession
from app.workout import history
from app.workout.errors import CommitFailedError, IncompleteSessionError, InvalidDurationError
from app.workout.history import HistoryCommitService, compute_duration
from app.workout.persistence import MemoryLocalStorage, SnapshotPersistence
from app.workout.store import WorkoutSessionStore

START = datetime.datetime(2024, 1, 10, 18, 0, 0)


def _session() -> WorkoutSession:
    return WorkoutSession(is_active=True, owner_id="user-a", source_routine_id=7, source_routine_name="Push Day",
                          category=WorkoutCategory.PUSH, started_at=START, elapsed_seconds=5,
                          exercises=[SessionExercise(exercise_id="bench", exercise_name="Bench Press",
                                                     sets=[SessionSet(target_reps=8, target_weight=60,
                                                                      completed=True)])])


class TestComputeDuration:
    @pytest.mark.parametrize(
        "delta, expected",
        [
            (datetime.timedelta(0), 0),
            (datetime.timedelta(seconds=59, milliseconds=999), 59),
            (datetime.timedelta(hours=1, seconds=1), 3601),
        ],
    )
    def test_floor_seconds(self, delta, expected):
        assert compute_duration(START, START + delta) == expected

    def test_negative_rejected(self):
        with pytest.raises(InvalidDurationError):
            compute_duration(START, START - datetime.timedelta(milliseconds=1))


class TestHistoryCommitService:
    @pytest.mark.asyncio
    async def test_writes_record_and_updates_streak(self, session_factory, db, user):
        service = HistoryCommitService(session_factory)
        ended = START + datetime.timedelta(minutes=42, seconds=10, milliseconds=700)

        record_id = await service.commit("user-a", _session(), START, ended)

        record = WorkoutHistoryRepository(db).get_by_id(record_id)
        assert record.owner_id == "user-a"
        assert record.routine_id == 7
        assert record.category == "Push"
        assert record.duration_seconds == 2530
        assert record.exercises[0]["sets"][0] == {"target_reps": 8, "target_weight": 60, "completed": True}
        assert record.created_at is not None

        db.expire_all()
        profile = db.get(User, "user-a")
        assert profile.current_streak == 1
        assert profile.last_workout_date == datetime.date(2024, 1, 10)

    @pytest.mark.asyncio
    async def test_streak_day_uses_local_start(self, session_factory, db, user):
        service = HistoryCommitService(session_factory, tz_name="Asia/Tokyo")
        started = datetime.datetime(2024, 1, 10, 16, 30)  # 01:30 on Jan 11 in Tokyo

        await service.commit("user-a", _session(), started, started + datetime.timedelta(hours=1))

        db.expire_all()
        assert db.get(User, "user-a").last_workout_date == datetime.date(2024, 1, 11)

    @pytest.mark.asyncio
    async def test_negative_duration_writes_nothing(self, session_factory, db, user):
        service = HistoryCommitService(session_factory)
        with pytest.raises(InvalidDurationError):
            await service.commit("user-a", _session(), START, START - datetime.timedelta(seconds=1))
        assert WorkoutHistoryRepository(db).get_by_owner("user-a") == []

    @pytest.mark.asyncio
    async def test_storage_failure_raises_commit_failed(self):
        # No tables: every write fails
        engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
        service = HistoryCommitService(lambda: Session(engine))
        with pytest.raises(CommitFailedError):
            await service.commit("user-a", _session(), START, START + datetime.timedelta(minutes=1))

    @pytest.mark.asyncio
    async def test_streak_failure_keeps_record(self, session_factory, db, user, monkeypatch):
        def broken(*args, **kwargs):
            raise OperationalError("UPDATE users", {}, Exception("locked"))

        monkeypatch.setattr(history, "record_workout", broken)
        service = HistoryCommitService(session_factory)

        record_id = await service.commit("user-a", _session(), START, START + datetime.timedelta(minutes=1))

        assert WorkoutHistoryRepository(db).get_by_id(record_id) is not None
        db.expire_all()
        assert db.get(User, "user-a").current_streak == 0

    @pytest.mark.asyncio
    async def test_unexpected_streak_error_still_finishes_once(self, session_factory, db, user, routine, clock,
                                                              monkeypatch):
        def broken(*args, **kwargs):
            raise ValueError("streak boom")

        monkeypatch.setattr(history, "record_workout", broken)
        store = WorkoutSessionStore(HistoryCommitService(session_factory), SnapshotPersistence(MemoryLocalStorage()),
                                    clock=clock)
        store.start_workout("user-a", routine)
        clock.advance(60)

        record_id = await store.finish()

        assert record_id is not None
        assert not store.state.is_active
        assert store.state.last_error is None
        with pytest.raises(IncompleteSessionError):
            await store.finish()
        assert len(WorkoutHistoryRepository(db).get_by_owner("user-a")) == 1

    @pytest.mark.asyncio
    async def test_two_workouts_same_day_count_once(self, session_factory, db, user):
        service = HistoryCommitService(session_factory)
        await service.commit("user-a", _session(), START, START + datetime.timedelta(minutes=30))
        later = START + datetime.timedelta(hours=2)
        await service.commit("user-a", _session(), later, later + datetime.timedelta(minutes=30))

        db.expire_all()
        assert db.get(User, "user-a").current_streak == 1
        assert len(WorkoutHistoryRepository(db).get_by_owner("user-a")) == 2
