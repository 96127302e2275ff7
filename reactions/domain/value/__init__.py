"""Domain value objects for post reactions."""

from reactions.domain.value.identifiers import ItemId, VoterId
from reactions.domain.value.types import (
    GuestToken,
    ReactionKind,
    ReactionMode,
    Tally,
    VoteOutcome,
    VoteResult,
)

__all__ = [
    # Identifiers
    "ItemId",
    "VoterId",
    # Types
    "GuestToken",
    "ReactionKind",
    "ReactionMode",
    "Tally",
    "VoteOutcome",
    "VoteResult",
]
