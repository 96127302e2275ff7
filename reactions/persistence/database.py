"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from reactions.config import Settings
from reactions.domain.error import StorageUnavailableError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
    )


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Translate backend failures into StorageUnavailableError.

    Args:
        operation: Name of the store operation, for logs

    Raises:
        StorageUnavailableError: On SQLAlchemy or connection errors
    """
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        logfire.error(
            "Reaction storage failure",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise StorageUnavailableError(operation) from e
