"""Domain model entities for post reactions."""

from reactions.domain.model.tally import ItemTally
from reactions.domain.model.vote import VoteRecord

__all__ = [
    "ItemTally",
    "VoteRecord",
]
