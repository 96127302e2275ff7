"""In-memory repository implementations for testing."""

from .config import InMemoryReactionConfigRepository
from .vote import InMemoryVoteStore

__all__ = [
    "InMemoryReactionConfigRepository",
    "InMemoryVoteStore",
]
