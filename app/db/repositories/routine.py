"""Routine repository."""

from typing import Optional

from sqlmodel import Session, select

from app.models.routine import Routine


class RoutineRepository:
    """Repository for Routine database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, routine: Routine) -> Routine:
        self.session.add(routine)
        self.session.commit()
        self.session.refresh(routine)
        return routine

    def get_by_id(self, routine_id: int) -> Optional[Routine]:
        return self.session.get(Routine, routine_id)

    def get_all_by_owner(self, owner_id: str) -> list[Routine]:
        """Get all routines of an owner, newest first."""
        statement = (
            select(Routine)
            .where(Routine.owner_id == owner_id)
            .order_by(Routine.created_at.desc(), Routine.id.desc())
        )
        return list(self.session.exec(statement).all())

    def update(self, routine: Routine) -> Routine:
        self.session.add(routine)
        self.session.commit()
        self.session.refresh(routine)
        return routine

    def delete(self, routine_id: int) -> bool:
        routine = self.get_by_id(routine_id)
        if routine:
            self.session.delete(routine)
            self.session.commit()
            return True
        return False
