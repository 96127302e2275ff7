"""PostgreSQL implementation of the reaction config repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from reactions.domain.repository import ReactionConfigRepository
from reactions.domain.value import ReactionMode
from reactions.persistence.database import storage_errors
from reactions.persistence.tables import reaction_config_table

MODE_KEY = "mode"


class PostgresReactionConfigRepository(ReactionConfigRepository):
    """PostgreSQL implementation of ReactionConfigRepository."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self.session_factory = session_factory

    async def get_mode(self) -> Optional[ReactionMode]:
        """Get the stored mode.

        Unknown stored values fall back to None, so the configured default
        applies.
        """
        stmt = select(reaction_config_table.c.value).where(
            reaction_config_table.c.key == MODE_KEY
        )
        with storage_errors("get_mode"):
            async with self.session_factory() as session:
                value = (await session.execute(stmt)).scalar_one_or_none()
        if value is None:
            return None
        try:
            return ReactionMode(value)
        except ValueError:
            return None

    async def set_mode(self, mode: ReactionMode) -> None:
        """Upsert the stored mode."""
        stmt = insert(reaction_config_table).values(key=MODE_KEY, value=mode.value)
        stmt = stmt.on_conflict_do_update(
            index_elements=[reaction_config_table.c.key],
            set_={"value": mode.value, "updated_at": func.now()},
        )
        with storage_errors("set_mode"):
            async with self.session_factory.begin() as session:
                await session.execute(stmt)
