"""Vote store interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from reactions.domain.model import ItemTally
from reactions.domain.value import ItemId, ReactionKind, Tally, VoterId


class VoteStore(ABC):
    """Store for item counters and the per-voter vote ledger.

    The store is the only place reaction state is mutated. Implementations
    live in the persistence layer and must make ``record_vote`` atomic:
    the ledger check, the ledger insert and the counter increment either all
    happen or none do.

    Implementations raise only ``AlreadyVotedError`` and
    ``StorageUnavailableError``.
    """

    @abstractmethod
    async def has_voted(self, voter_id: VoterId, item_id: ItemId) -> bool:
        """Check whether a voter has reacted to an item.

        Args:
            voter_id: Opaque voter identifier
            item_id: Item identifier

        Returns:
            True if a vote record exists for the pair
        """
        pass

    @abstractmethod
    async def record_vote(
        self, voter_id: VoterId, item_id: ItemId, reaction: ReactionKind
    ) -> Tally:
        """Record a vote and increment the matching counter as one atomic unit.

        Args:
            voter_id: Opaque voter identifier
            item_id: Item identifier
            reaction: Reaction kind to count

        Returns:
            The item's counts after the increment

        Raises:
            AlreadyVotedError: If a record for the pair existed at the atomic check
            StorageUnavailableError: If the backend fails
        """
        pass

    @abstractmethod
    async def get_counts(self, item_id: ItemId) -> Tally:
        """Read an item's counts.

        Args:
            item_id: Item identifier

        Returns:
            Current counts, (0, 0) for items nobody reacted to
        """
        pass

    @abstractmethod
    async def count_records(self, item_id: ItemId) -> Tally:
        """Count ledger records of an item by reaction kind.

        Used to audit that counters match the ledger.

        Args:
            item_id: Item identifier

        Returns:
            Counts recomputed from the ledger
        """
        pass

    @abstractmethod
    async def list_tallies(self, limit: int) -> List[ItemTally]:
        """List item counters, most recently voted first.

        Args:
            limit: Maximum number of items

        Returns:
            Item tallies
        """
        pass

    @abstractmethod
    async def bulk_erase(
        self,
        item_ids: Optional[Sequence[ItemId]] = None,
        voter_ids: Optional[Sequence[VoterId]] = None,
    ) -> int:
        """Administratively erase vote records and counters.

        - No filters: erase every record and every counter
        - Item filter: erase the items' records and counters
        - Voter filter: erase the voters' records and recompute affected counters
        - Both filters: erase records matching both, recompute affected counters

        Counters always equal the remaining ledger afterwards.

        Args:
            item_ids: Restrict to these items
            voter_ids: Restrict to these voters

        Returns:
            Number of vote records deleted
        """
        pass
