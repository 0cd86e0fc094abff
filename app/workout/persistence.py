"""
Device-local persistence of the in-flight workout.

The active session is mirrored as a versioned JSON envelope under one
fixed key::

    {"version": 1, "data": {<WorkoutSession>}, "writtenAt": "2024-01-10T18:03:11.201"}

Nothing here contains business logic.  Loading degrades to "no
snapshot" for anything unexpected (absent, unparseable, other version,
idle payload) and storage failures are logged, never raised.
"""

import json
import logging
import os
import tempfile
from enum import Enum
from pathlib import Path
from typing import Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.schemas.workout_session import WorkoutSession
from app.workout.clock import Clock, utcnow

logger = logging.getLogger(__name__)


# ======================================================================
# Storage backends
# ======================================================================


class LocalStorage(Protocol):
    """Key → string store local to one device."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...


class MemoryLocalStorage:
    """In-process storage.  Useful for testing."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileLocalStorage:
    """One ``<key>.json`` file per key inside *directory*.

    Writes go through a temporary file and an atomic rename so a crash
    mid-write never leaves a truncated snapshot behind.
    """

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, self._path(key))
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def remove_item(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


# ======================================================================
# Snapshot envelope
# ======================================================================


class PersistenceConfig(BaseModel):
    """Where and in which format the snapshot is written."""

    key: str = Field("curlworkout_active_workout", min_length=1)
    version: int = Field(1, ge=1)


class PersistedSnapshot(BaseModel):
    """Versioned envelope around a session."""

    model_config = ConfigDict(populate_by_name=True)

    version: int
    data: WorkoutSession
    written_at: str = Field(..., alias="writtenAt", description="ISO-8601 write time")


class RestoreDiscardReason(str, Enum):
    """Why a stored snapshot was not restored.  Logged, never raised."""

    UNPARSEABLE = "unparseable"
    VERSION_MISMATCH = "version_mismatch"
    NOT_ACTIVE = "not_active"
    OWNER_MISMATCH = "owner_mismatch"
    NO_IDENTITY = "no_identity"


def log_discard(reason: RestoreDiscardReason, detail: str = "") -> None:
    logger.warning("Stored workout discarded (%s)%s", reason.value, f": {detail}" if detail else "")


class SnapshotPersistence:
    """Save/load/clear of the session snapshot."""

    def __init__(self, storage: LocalStorage, config: Optional[PersistenceConfig] = None,
                 clock: Clock = utcnow, ):
        self.storage = storage
        self.config = config or PersistenceConfig()
        self._clock = clock

    def save(self, session: WorkoutSession) -> None:
        """Write the snapshot while *session* is active, delete it otherwise."""
        try:
            if session.is_active:
                envelope = PersistedSnapshot(version=self.config.version, data=session,
                                             written_at=self._clock().isoformat(), )
                self.storage.set_item(self.config.key, envelope.model_dump_json(by_alias=True))
            else:
                self.storage.remove_item(self.config.key)
        except Exception:
            logger.exception("Failed to save workout snapshot")

    def load(self) -> Optional[WorkoutSession]:
        """Read the snapshot.

        Returns ``None`` if it is absent, unparseable, of another
        version, holds an idle session, or holds an active session
        with no start time or no exercises.  Discarded snapshots are
        removed from storage.
        """
        try:
            raw = self.storage.get_item(self.config.key)
        except Exception:
            logger.exception("Failed to read workout snapshot")
            return None
        if raw is None:
            return None

        try:
            payload = json.loads(raw)
        except ValueError as exc:
            return self._discard(RestoreDiscardReason.UNPARSEABLE, str(exc))
        if not isinstance(payload, dict):
            return self._discard(RestoreDiscardReason.UNPARSEABLE, "envelope is not an object")

        version = payload.get("version")
        if version != self.config.version:
            return self._discard(RestoreDiscardReason.VERSION_MISMATCH,
                                 f"found {version!r}, expected {self.config.version}")

        try:
            envelope = PersistedSnapshot.model_validate(payload)
        except ValidationError as exc:
            return self._discard(RestoreDiscardReason.UNPARSEABLE, str(exc))

        session = envelope.data
        if not session.is_active:
            return self._discard(RestoreDiscardReason.NOT_ACTIVE)
        if session.started_at is None or not session.exercises:
            return self._discard(RestoreDiscardReason.UNPARSEABLE, "active session without start time or exercises")
        return session

    def clear(self) -> None:
        """Delete the snapshot.  Never raises."""
        try:
            self.storage.remove_item(self.config.key)
        except Exception:
            logger.exception("Failed to clear workout snapshot")

    def _discard(self, reason: RestoreDiscardReason, detail: str = "") -> None:
        log_discard(reason, detail)
        self.clear()
        return None
