"""
Bootstrap reconciliation of the stored workout with the signed-in identity.

Runs once, on the first identity report of the process:

1. ``restore_attempted`` already set → nothing to do.
2. A session is already active in memory → it wins; mark attempted.
3. No usable snapshot → mark attempted.
4. Identity present: restore the snapshot if it belongs to that
   identity, otherwise clear it (no cross-account leakage).
5. No identity: clear the snapshot (orphaned session).

Independently, each change to a new non-null identity warms the
owner's data cache.
"""

import logging
from typing import Callable, Optional

from app.schemas.user import Identity
from app.workout.persistence import RestoreDiscardReason, SnapshotPersistence, log_discard
from app.workout.store import WorkoutSessionStore

logger = logging.getLogger(__name__)


class WorkoutBootstrap:
    def __init__(self, store: WorkoutSessionStore, persistence: SnapshotPersistence,
                 preload: Optional[Callable[[str], None]] = None, ):
        self._store = store
        self._persistence = persistence
        self._preload = preload
        self._last_owner_id: Optional[str] = None

    def reconcile(self, identity: Optional[Identity]) -> bool:
        """Run the one-time restore decision.  Returns whether a snapshot was restored."""
        store = self._store
        if store.state.restore_attempted:
            return False
        if store.state.is_active:
            store.mark_restore_attempted()
            return False

        snapshot = self._persistence.load()
        if snapshot is None:
            store.mark_restore_attempted()
            return False

        if identity is None:
            log_discard(RestoreDiscardReason.NO_IDENTITY, f"snapshot owned by {snapshot.owner_id}")
            self._persistence.clear()
            store.mark_restore_attempted()
            return False

        if snapshot.owner_id != identity.id:
            log_discard(RestoreDiscardReason.OWNER_MISMATCH,
                        f"snapshot owned by {snapshot.owner_id}, signed in as {identity.id}")
            self._persistence.clear()
            store.mark_restore_attempted()
            return False

        store.restore(snapshot)
        return True

    def on_identity(self, identity: Optional[Identity]) -> None:
        """Handle an identity report: reconcile once, warm the cache on change."""
        self.reconcile(identity)

        owner_id = identity.id if identity is not None else None
        if owner_id == self._last_owner_id:
            return
        self._last_owner_id = owner_id
        if owner_id is not None and self._preload is not None:
            logger.info("Identity changed to %s; preloading data", owner_id)
            self._preload(owner_id)
