"""
Workout history repository.

Append-only: records are created once and read back through ordered
queries.  Lists are ordered by write time (``created_at``), newest
first; calendar windows select on ``started_at``.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.workout_history import WorkoutHistory


class WorkoutHistoryRepository:
    """Repository for WorkoutHistory database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, record: WorkoutHistory) -> WorkoutHistory:
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return record

    def get_by_id(self, record_id: int) -> Optional[WorkoutHistory]:
        return self.session.get(WorkoutHistory, record_id)

    def get_by_owner(self, owner_id: str, category: Optional[str] = None,
                     limit: Optional[int] = None, ) -> list[WorkoutHistory]:
        """Get an owner's history, newest first, optionally filtered by category."""
        statement = select(WorkoutHistory).where(WorkoutHistory.owner_id == owner_id)
        if category is not None:
            statement = statement.where(WorkoutHistory.category == category)
        statement = statement.order_by(WorkoutHistory.created_at.desc(), WorkoutHistory.id.desc())
        if limit is not None:
            statement = statement.limit(limit)
        return list(self.session.exec(statement).all())

    def get_by_started_range(self, owner_id: str, start: datetime.datetime,
                             end: datetime.datetime, ) -> list[WorkoutHistory]:
        """Get records whose workout started within ``[start, end)``, newest first."""
        statement = (
            select(WorkoutHistory)
            .where(
                WorkoutHistory.owner_id == owner_id,
                WorkoutHistory.started_at >= start,
                WorkoutHistory.started_at < end,
            )
            .order_by(WorkoutHistory.created_at.desc(), WorkoutHistory.id.desc())
        )
        return list(self.session.exec(statement).all())

    def get_started_times(self, owner_id: str) -> list[datetime.datetime]:
        """Start instants of every record of an owner (for streak recomputation)."""
        statement = select(WorkoutHistory.started_at).where(WorkoutHistory.owner_id == owner_id)
        return list(self.session.exec(statement).all())
