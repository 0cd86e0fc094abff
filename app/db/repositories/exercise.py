"""Exercise catalog repository."""

from typing import Optional

from sqlmodel import Session, select

from app.models.exercise import Exercise


class ExerciseRepository:
    """Repository for Exercise database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, exercise_id: str) -> Optional[Exercise]:
        return self.session.get(Exercise, exercise_id)

    def get_all(self, category: Optional[str] = None) -> list[Exercise]:
        """Get catalog exercises ordered by name, optionally of one category."""
        statement = select(Exercise)
        if category is not None:
            statement = statement.where(Exercise.category == category)
        statement = statement.order_by(Exercise.name, Exercise.id)
        return list(self.session.exec(statement).all())

    def add_missing(self, exercises: list[Exercise]) -> int:
        """Insert the exercises whose id is not stored yet.  Returns how many were added."""
        added = 0
        for exercise in exercises:
            if self.get_by_id(exercise.id) is None:
                self.session.add(exercise)
                added += 1
        if added:
            self.session.commit()
        return added
