"""Repository interfaces for the reactions domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from reactions.domain.repository.config import ReactionConfigRepository
from reactions.domain.repository.vote import VoteStore

__all__ = [
    "ReactionConfigRepository",
    "VoteStore",
]
