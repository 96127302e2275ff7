"""Reaction domain service."""

from typing import Any, List, Optional, Sequence

import logfire

from reactions.domain.error import (
    AlreadyVotedError,
    InvalidRequestError,
    ModeDisabledError,
)
from reactions.domain.model import ItemTally
from reactions.domain.repository import VoteStore
from reactions.domain.value import (
    ItemId,
    ReactionKind,
    ReactionMode,
    Tally,
    VoteOutcome,
    VoteResult,
    VoterId,
)

from .base import Service


# Item ids are stored as PostgreSQL BIGINT
MAX_ITEM_ID = 2**63 - 1


def parse_item_id(item_id: Any) -> ItemId:
    """Validate an item id.

    Raises:
        InvalidRequestError: If the id is not an integer in 1..MAX_ITEM_ID
    """
    # bool is an int subclass but never a valid id
    if isinstance(item_id, bool) or not isinstance(item_id, int):
        raise InvalidRequestError("Item id must be a positive integer")
    if item_id <= 0 or item_id > MAX_ITEM_ID:
        raise InvalidRequestError("Item id out of range")
    return ItemId(item_id)


def parse_voter_id(voter_id: Any) -> VoterId:
    """Validate a voter id.

    Raises:
        InvalidRequestError: If the id is not a non-empty string
    """
    if not isinstance(voter_id, str) or not voter_id.strip():
        raise InvalidRequestError("Voter id must be a non-empty string")
    return VoterId(voter_id)


def parse_reaction(reaction: Any) -> ReactionKind:
    """Validate a reaction kind.

    Raises:
        InvalidRequestError: If the reaction is neither 'like' nor 'dislike'
    """
    try:
        return ReactionKind(reaction)
    except ValueError:
        raise InvalidRequestError("Reaction must be 'like' or 'dislike'")


class ReactionService(Service):
    """Domain service for reactions.

    The sole entry point mutating reaction state. It enforces the mode and
    input rules, then delegates the atomic write to the vote store.
    No retries are performed here.
    """

    def __init__(self, vote_store: VoteStore) -> None:
        """Initialize reaction service.

        Args:
            vote_store: Vote store
        """
        self.vote_store = vote_store

    async def cast_vote(
        self,
        voter_id: VoterId,
        item_id: ItemId,
        reaction_kind: ReactionKind | str,
        current_mode: ReactionMode | str,
    ) -> VoteResult:
        """Cast a voter's reaction on an item.

        Args:
            voter_id: Opaque voter identifier
            item_id: Item identifier
            reaction_kind: 'like' or 'dislike'
            current_mode: Mode in effect for this call

        Returns:
            VOTED with the new counts, or ALREADY_VOTED with the current counts

        Raises:
            InvalidRequestError: If any input is malformed
            ModeDisabledError: If the mode does not accept the reaction
            StorageUnavailableError: If the store fails
        """
        item = parse_item_id(item_id)
        voter = parse_voter_id(voter_id)
        reaction = parse_reaction(reaction_kind)
        mode = ReactionMode(current_mode)

        with logfire.span(
            "reaction_service.cast_vote",
            item_id=item,
            reaction=reaction.value,
            mode=mode.value,
        ):
            if not mode.allows(reaction):
                logfire.warn(
                    "Reaction disabled by mode",
                    item_id=item,
                    reaction=reaction.value,
                    mode=mode.value,
                )
                raise ModeDisabledError(reaction.value, mode.value)

            try:
                tally = await self.vote_store.record_vote(voter, item, reaction)
            except AlreadyVotedError:
                logfire.info("Duplicate vote attempt", item_id=item)
                current = await self.vote_store.get_counts(item)
                return VoteResult(outcome=VoteOutcome.ALREADY_VOTED, tally=current)

            logfire.info(
                "Vote recorded",
                item_id=item,
                reaction=reaction.value,
                likes=tally.likes,
                dislikes=tally.dislikes,
            )
            return VoteResult(outcome=VoteOutcome.VOTED, tally=tally)

    async def get_tally(self, item_id: ItemId) -> Tally:
        """Get an item's counts.

        Raises:
            InvalidRequestError: If the item id is malformed
        """
        return await self.vote_store.get_counts(parse_item_id(item_id))

    async def has_voted(self, voter_id: VoterId, item_id: ItemId) -> bool:
        """Check whether a voter has reacted to an item."""
        return await self.vote_store.has_voted(
            parse_voter_id(voter_id), parse_item_id(item_id)
        )

    async def list_tallies(self, limit: int) -> List[ItemTally]:
        """List item counters for the admin dashboard.

        Raises:
            InvalidRequestError: If the limit is outside 1-500
        """
        if limit < 1 or limit > 500:
            raise InvalidRequestError("Limit must be between 1 and 500")
        return await self.vote_store.list_tallies(limit)

    async def erase(
        self,
        item_ids: Optional[Sequence[int]] = None,
        voter_ids: Optional[Sequence[str]] = None,
    ) -> int:
        """Erase vote records and counters.

        Args:
            item_ids: Restrict to these items
            voter_ids: Restrict to these voters

        Returns:
            Number of vote records deleted

        Raises:
            InvalidRequestError: If a filter is given but empty or malformed
        """
        items = None
        voters = None
        if item_ids is not None:
            if not item_ids:
                raise InvalidRequestError("item_ids must not be empty")
            items = [parse_item_id(i) for i in item_ids]
        if voter_ids is not None:
            if not voter_ids:
                raise InvalidRequestError("voter_ids must not be empty")
            voters = [parse_voter_id(v) for v in voter_ids]

        with logfire.span(
            "reaction_service.erase",
            item_count=len(items) if items is not None else None,
            voter_count=len(voters) if voters is not None else None,
        ):
            deleted = await self.vote_store.bulk_erase(
                item_ids=items, voter_ids=voters
            )
            logfire.warn("Reactions erased", deleted=deleted)
            return deleted
