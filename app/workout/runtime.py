"""
Workout runtime: composition root of the per-device workout core.

One instance lives on ``app.state.workout_runtime`` for the life of the
process.  It owns the session store, the snapshot persistence, the
timer, the bootstrap routine and the data cache, and offers the
operations request handlers need.  Tests build their own instance.
"""

import logging
from typing import Callable, Optional

from sqlmodel import Session

from app.schemas.routine import RoutineResponse
from app.schemas.user import Identity
from app.schemas.workout_session import WorkoutSession
from app.workout.bootstrap import WorkoutBootstrap
from app.workout.cache import UserDataCache
from app.workout.clock import Clock, utcnow
from app.workout.history import HistoryCommitService
from app.workout.persistence import FileLocalStorage, LocalStorage, PersistenceConfig, SnapshotPersistence
from app.workout.store import HistoryCommitter, WorkoutSessionStore
from app.workout.timer import WorkoutTimer

logger = logging.getLogger(__name__)


class WorkoutRuntime:
    def __init__(self, store: WorkoutSessionStore, persistence: SnapshotPersistence, timer: WorkoutTimer,
                 bootstrap: WorkoutBootstrap, cache: Optional[UserDataCache] = None, tz_name: str = "UTC",
                 clock: Clock = utcnow, ):
        self.store = store
        self.persistence = persistence
        self.timer = timer
        self.bootstrap = bootstrap
        self.cache = cache
        self.tz_name = tz_name
        self.clock = clock

    @classmethod
    def build(cls, session_factory: Callable[[], Session], storage: LocalStorage,
              config: Optional[PersistenceConfig] = None, committer: Optional[HistoryCommitter] = None,
              tz_name: str = "UTC", timer_interval: float = 1.0, recent_limit: int = 5,
              clock: Clock = utcnow, ) -> "WorkoutRuntime":
        """Wire every component around one store."""
        persistence = SnapshotPersistence(storage, config, clock=clock)
        committer = committer or HistoryCommitService(session_factory, tz_name=tz_name)
        store = WorkoutSessionStore(committer, persistence, clock=clock)
        cache = UserDataCache(session_factory, recent_limit=recent_limit)
        bootstrap = WorkoutBootstrap(store, persistence, preload=cache.preload)
        timer = WorkoutTimer(store, interval=timer_interval)
        return cls(store, persistence, timer, bootstrap, cache=cache, tz_name=tz_name, clock=clock)

    @classmethod
    def from_settings(cls, settings, session_factory: Callable[[], Session]) -> "WorkoutRuntime":
        storage = FileLocalStorage(settings.LOCAL_STORAGE_DIR)
        config = PersistenceConfig(key=settings.SNAPSHOT_KEY, version=settings.SNAPSHOT_VERSION)
        return cls.build(session_factory, storage, config=config, tz_name=settings.TIMEZONE,
                         timer_interval=settings.TIMER_INTERVAL_SECONDS,
                         recent_limit=settings.RECENT_WORKOUTS_LIMIT, )

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def report_identity(self, identity: Optional[Identity]) -> None:
        """Feed the current identity to bootstrap and resume ticking if needed."""
        self.bootstrap.on_identity(identity)
        if self.store.state.is_active:
            self.timer.ensure_running()

    # ------------------------------------------------------------------
    # Session operations
    # ------------------------------------------------------------------

    def start_workout(self, owner_id: str, routine: RoutineResponse) -> WorkoutSession:
        state = self.store.start_workout(owner_id, routine)
        self.timer.ensure_running()
        return state

    async def finish(self) -> Optional[int]:
        record_id = await self.store.finish()
        if record_id is None:
            return None
        await self.timer.stop()
        if self.cache is not None:
            self.cache.add_workout(record_id)
        return record_id

    async def cancel(self) -> WorkoutSession:
        state = self.store.cancel()
        await self.timer.stop()
        return state

    async def shutdown(self) -> None:
        await self.timer.stop()
        logger.info("Workout runtime shut down")
