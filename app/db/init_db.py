"""
Database initialization.

Creates all tables for local runs without Alembic and seeds the
built-in exercise catalog.
"""

import logging

from sqlmodel import Session, SQLModel

from app.db.session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create the tables if missing and add the built-in exercises."""
    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401
    from app.db.exercise_catalog import seed_exercises

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created: %s", ", ".join(sorted(SQLModel.metadata.tables)))

    with Session(engine) as session:
        seed_exercises(session)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
