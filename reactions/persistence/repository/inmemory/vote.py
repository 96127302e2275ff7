"""In-memory vote store for testing and local runs."""

import asyncio
from collections import defaultdict
from datetime import datetime, timezone
from typing import Optional, Sequence

from reactions.domain.error import AlreadyVotedError
from reactions.domain.model import ItemTally, VoteRecord
from reactions.domain.repository import VoteStore
from reactions.domain.value import ItemId, ReactionKind, Tally, VoterId


class InMemoryVoteStore(VoteStore):
    """In-memory implementation of VoteStore.

    Writes are serialized by one asyncio lock per item, so votes on
    different items never wait on each other.
    """

    def __init__(self) -> None:
        self._ledger: dict[tuple[VoterId, ItemId], VoteRecord] = {}
        self._tallies: dict[ItemId, ItemTally] = {}
        self._locks: defaultdict[ItemId, asyncio.Lock] = defaultdict(asyncio.Lock)

    async def has_voted(self, voter_id: VoterId, item_id: ItemId) -> bool:
        """Check whether a voter has reacted to an item."""
        return (voter_id, item_id) in self._ledger

    async def record_vote(
        self, voter_id: VoterId, item_id: ItemId, reaction: ReactionKind
    ) -> Tally:
        """Record a vote under the item's lock.

        Raises:
            AlreadyVotedError: If the voter already reacted to the item
        """
        async with self._locks[item_id]:
            if (voter_id, item_id) in self._ledger:
                raise AlreadyVotedError(voter_id, item_id)

            record = VoteRecord(voter_id=voter_id, item_id=item_id, reaction=reaction)
            await self._write(record)
            return self._tallies[item_id].tally

    async def _write(self, record: VoteRecord) -> None:
        """Insert a ledger record and increment its counter together."""
        current = self._tallies.get(record.item_id)
        tally = current.tally if current else Tally()
        self._ledger[(record.voter_id, record.item_id)] = record
        self._tallies[record.item_id] = ItemTally(
            item_id=record.item_id,
            tally=tally.incremented(record.reaction),
            updated_at=record.created_at,
        )

    async def get_counts(self, item_id: ItemId) -> Tally:
        """Read an item's counters."""
        current = self._tallies.get(item_id)
        return current.tally if current else Tally()

    async def count_records(self, item_id: ItemId) -> Tally:
        """Count ledger records of an item by reaction."""
        reactions = [r.reaction for r in self._ledger.values() if r.item_id == item_id]
        return Tally(
            likes=reactions.count(ReactionKind.LIKE),
            dislikes=reactions.count(ReactionKind.DISLIKE),
        )

    async def list_tallies(self, limit: int) -> list[ItemTally]:
        """List counters, most recently voted first."""
        ordered = sorted(
            self._tallies.values(), key=lambda t: t.updated_at, reverse=True
        )
        return ordered[:limit]

    async def bulk_erase(
        self,
        item_ids: Optional[Sequence[ItemId]] = None,
        voter_ids: Optional[Sequence[VoterId]] = None,
    ) -> int:
        """Erase ledger records and counters."""
        items = set(item_ids) if item_ids is not None else None
        voters = set(voter_ids) if voter_ids is not None else None

        doomed = [
            key
            for key in self._ledger
            if (voters is None or key[0] in voters)
            and (items is None or key[1] in items)
        ]
        for key in doomed:
            del self._ledger[key]

        if voters is None:
            for item_id in list(self._tallies):
                if items is None or item_id in items:
                    del self._tallies[item_id]
        else:
            now = datetime.now(timezone.utc)
            for item_id in {key[1] for key in doomed}:
                if item_id in self._tallies:
                    self._tallies[item_id] = ItemTally(
                        item_id=item_id,
                        tally=await self.count_records(item_id),
                        updated_at=now,
                    )

        return len(doomed)
