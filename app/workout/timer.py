"""
Workout timer: the single tick source of the active session.

While the session is active the timer calls ``store.tick()`` once
immediately and then every ``interval`` seconds.  At most one
underlying task exists at a time; asking for the timer again while it
runs is a no-op.  The loop ends on its own once the session is no
longer active, and :meth:`WorkoutTimer.stop` cancels it explicitly.
"""

import asyncio
import contextlib
import logging
from typing import Optional

from app.workout.store import WorkoutSessionStore

logger = logging.getLogger(__name__)


class WorkoutTimer:
    """Cancellable repeating tick bound to one session store."""

    def __init__(self, store: WorkoutSessionStore, interval: float = 1.0):
        if interval <= 0:
            raise ValueError("Timer interval must be positive")
        self._store = store
        self._interval = interval
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def ensure_running(self) -> bool:
        """Start ticking if the session is active and no timer runs yet.

        Must be called from within the event loop.  Returns whether a
        timer is running afterwards.
        """
        if not self._store.state.is_active:
            return False
        if self.running:
            return True
        self._store.tick()
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info("Workout timer started (every %.1fs)", self._interval)
        return True

    async def stop(self) -> None:
        """Cancel the repeating tick and wait for it to end."""
        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("Workout timer stopped")

    async def _run(self) -> None:
        while self._store.state.is_active:
            await asyncio.sleep(self._interval)
            if not self._store.state.is_active:
                break
            self._store.tick()
        logger.debug("Workout timer loop ended: session no longer active")
