"""Vote record entity.

A vote record is the ledger fact that a voter reacted to an item.
Each voter can react once per item, and the reaction can never be changed.
"""

from datetime import datetime, timezone

from pydantic import Field

from reactions.domain.model.common import DomainModel
from reactions.domain.value import ItemId, ReactionKind, VoterId


class VoteRecord(DomainModel):
    """Vote record entity.

    Business rules:
    - At most one record per (voter_id, item_id), ever
    - Immutable once written, removed only by an administrative bulk erase
    """

    voter_id: VoterId
    item_id: ItemId
    reaction: ReactionKind
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
