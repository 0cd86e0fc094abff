"""
Database session management.

Provides SQLModel engine and session creation.
"""

from typing import Generator

from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from app.core.config import settings


def build_engine(url: str, echo: bool = False):
    """Create an engine for *url*.

    SQLite URLs share one connection across threads so an in-memory
    database survives between sessions.
    """
    if url.startswith("sqlite"):
        return create_engine(url, echo=echo, connect_args={"check_same_thread": False}, poolclass=StaticPool, )
    return create_engine(
        url,
        echo=echo,             # Log SQL queries in debug mode
        pool_pre_ping=True,    # Verify connections before using
        pool_size=5,           # Connection pool size
        max_overflow=10        # Max connections beyond pool_size
    )


engine = build_engine(settings.database_url, echo=settings.DEBUG)


def new_session() -> Session:
    """Open a session outside a request (workout core, scripts)."""
    return Session(engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance
    """
    with Session(engine) as session:
        yield session
