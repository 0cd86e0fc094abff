"""Tests for the workout timer task."""

import asyncio

import pytest

from app.workout.store import WorkoutSessionStore
from app.workout.timer import WorkoutTimer


class CountingStore(WorkoutSessionStore):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.ticks = 0

    def tick(self):
        self.ticks += 1
        return super().tick()


class NeverCommits:
    async def commit(self, *args):
        raise AssertionError("not expected")


@pytest.fixture
def store(clock):
    return CountingStore(NeverCommits(), clock=clock)


class TestWorkoutTimer:
    def test_rejects_non_positive_interval(self, store):
        with pytest.raises(ValueError):
            WorkoutTimer(store, interval=0)

    @pytest.mark.asyncio
    async def test_idle_session_does_not_start(self, store):
        timer = WorkoutTimer(store, interval=0.01)
        assert timer.ensure_running() is False
        assert not timer.running
        assert store.ticks == 0

    @pytest.mark.asyncio
    async def test_ticks_immediately_then_repeatedly(self, store, routine):
        store.start_workout("user-a", routine)
        timer = WorkoutTimer(store, interval=0.01)

        assert timer.ensure_running()
        assert store.ticks == 1

        await asyncio.sleep(0.05)
        assert store.ticks > 1
        await timer.stop()

    @pytest.mark.asyncio
    async def test_single_underlying_task(self, store, routine):
        store.start_workout("user-a", routine)
        timer = WorkoutTimer(store, interval=10)
        timer.ensure_running()
        first = timer._task
        for _ in range(5):
            timer.ensure_running()
        assert timer._task is first
        assert store.ticks == 1
        await timer.stop()

    @pytest.mark.asyncio
    async def test_stop_cancels(self, store, routine):
        store.start_workout("user-a", routine)
        timer = WorkoutTimer(store, interval=10)
        timer.ensure_running()
        await timer.stop()
        assert not timer.running
        await timer.stop()

    @pytest.mark.asyncio
    async def test_loop_ends_when_session_goes_idle(self, store, routine):
        store.start_workout("user-a", routine)
        timer = WorkoutTimer(store, interval=0.01)
        timer.ensure_running()
        store.cancel()
        await asyncio.sleep(0.05)
        assert not timer.running

    @pytest.mark.asyncio
    async def test_restarts_for_next_session(self, store, routine):
        timer = WorkoutTimer(store, interval=10)
        store.start_workout("user-a", routine)
        timer.ensure_running()
        store.cancel()
        await timer.stop()

        store.start_workout("user-a", routine)
        assert timer.ensure_running()
        assert timer.running
        await timer.stop()
