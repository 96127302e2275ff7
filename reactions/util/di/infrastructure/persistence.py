"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from reactions.config import Settings
from reactions.domain.repository import ReactionConfigRepository, VoteStore
from reactions.persistence.database import create_engine, create_session_factory
from reactions.persistence.repository import (
    PostgresReactionConfigRepository,
    PostgresVoteStore,
)
from reactions.util.di.base import ProviderBase
from reactions.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL.

    Stores open their own short transactions from the shared session
    factory, so they are APP-scoped.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed on shutdown."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.APP)
    def get_vote_store(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> VoteStore:
        """Provide vote store."""
        return PostgresVoteStore(session_factory)

    @provide(scope=Scope.APP)
    def get_reaction_config_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> ReactionConfigRepository:
        """Provide reaction config repository."""
        return PostgresReactionConfigRepository(session_factory)
