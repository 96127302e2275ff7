"""PostgreSQL repository implementations."""

from reactions.persistence.repository.config import PostgresReactionConfigRepository
from reactions.persistence.repository.vote import PostgresVoteStore

__all__ = [
    "PostgresReactionConfigRepository",
    "PostgresVoteStore",
]
