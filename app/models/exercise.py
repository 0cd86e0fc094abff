"""Exercise catalog database model."""

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class Exercise(SQLModel, table=True):
    """An exercise routines can reference by ``exercise_id``."""

    __tablename__ = "exercises"

    id: str = Field(primary_key=True, max_length=100)
    name: str = Field(nullable=False, max_length=200)
    category: str = Field(nullable=False, index=True, max_length=20)
    muscle_groups: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )
    equipment: str = Field(nullable=False, max_length=20)
