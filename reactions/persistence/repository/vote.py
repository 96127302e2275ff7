"""PostgreSQL implementation of the vote store."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from reactions.domain.error import AlreadyVotedError
from reactions.domain.model import ItemTally
from reactions.domain.repository import VoteStore
from reactions.domain.value import ItemId, ReactionKind, Tally, VoterId
from reactions.persistence.database import storage_errors
from reactions.persistence.mappers import (
    reaction_counts_to_tally,
    row_to_item_tally,
    row_to_tally,
)
from reactions.persistence.tables import reaction_tallies_table, reaction_votes_table


class PostgresVoteStore(VoteStore):
    """PostgreSQL implementation of VoteStore.

    Every mutation runs in its own transaction that is committed before the
    method returns. ``record_vote`` relies on the ``unique_reaction_vote``
    constraint: concurrent inserts for the same (voter, item) serialize on
    it, and inserts for different items never wait on each other.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize store with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self.session_factory = session_factory

    async def has_voted(self, voter_id: VoterId, item_id: ItemId) -> bool:
        """Check whether a voter has reacted to an item."""
        stmt = (
            select(reaction_votes_table.c.id)
            .where(
                and_(
                    reaction_votes_table.c.voter_id == voter_id,
                    reaction_votes_table.c.item_id == item_id,
                )
            )
            .limit(1)
        )
        with storage_errors("has_voted"):
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return result.first() is not None

    async def record_vote(
        self, voter_id: VoterId, item_id: ItemId, reaction: ReactionKind
    ) -> Tally:
        """Insert the ledger row and bump the counter in one transaction."""
        with logfire.span(
            "vote_store.record_vote", item_id=item_id, reaction=reaction.value
        ):
            ledger_stmt = (
                insert(reaction_votes_table)
                .values(voter_id=voter_id, item_id=item_id, reaction=reaction.value)
                .on_conflict_do_nothing(constraint="unique_reaction_vote")
                .returning(reaction_votes_table.c.id)
            )

            is_like = reaction is ReactionKind.LIKE
            counter = (
                reaction_tallies_table.c.like_count
                if is_like
                else reaction_tallies_table.c.dislike_count
            )
            tally_stmt = insert(reaction_tallies_table).values(
                item_id=item_id,
                like_count=1 if is_like else 0,
                dislike_count=0 if is_like else 1,
            )
            tally_stmt = tally_stmt.on_conflict_do_update(
                index_elements=[reaction_tallies_table.c.item_id],
                set_={counter.key: counter + 1, "updated_at": func.now()},
            ).returning(
                reaction_tallies_table.c.like_count,
                reaction_tallies_table.c.dislike_count,
            )

            with storage_errors("record_vote"):
                async with self.session_factory.begin() as session:
                    inserted = await session.execute(ledger_stmt)
                    if inserted.first() is None:
                        # Nothing was written, the rollback is a no-op
                        raise AlreadyVotedError(voter_id, item_id)
                    row = (await session.execute(tally_stmt)).one()

            return row_to_tally(row._asdict())

    async def get_counts(self, item_id: ItemId) -> Tally:
        """Read an item's counters."""
        stmt = select(
            reaction_tallies_table.c.like_count,
            reaction_tallies_table.c.dislike_count,
        ).where(reaction_tallies_table.c.item_id == item_id)
        with storage_errors("get_counts"):
            async with self.session_factory() as session:
                row = (await session.execute(stmt)).first()
        return row_to_tally(row._asdict()) if row else Tally()

    async def count_records(self, item_id: ItemId) -> Tally:
        """Count ledger rows of an item by reaction."""
        stmt = (
            select(
                reaction_votes_table.c.reaction,
                func.count().label("count"),
            )
            .where(reaction_votes_table.c.item_id == item_id)
            .group_by(reaction_votes_table.c.reaction)
        )
        with storage_errors("count_records"):
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                rows = [row._asdict() for row in result.fetchall()]
        return reaction_counts_to_tally(rows)

    async def list_tallies(self, limit: int) -> List[ItemTally]:
        """List counters, most recently voted first."""
        stmt = (
            select(reaction_tallies_table)
            .order_by(reaction_tallies_table.c.updated_at.desc())
            .limit(limit)
        )
        with storage_errors("list_tallies"):
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return [row_to_item_tally(row._asdict()) for row in result.fetchall()]

    async def bulk_erase(
        self,
        item_ids: Optional[Sequence[ItemId]] = None,
        voter_ids: Optional[Sequence[VoterId]] = None,
    ) -> int:
        """Erase ledger rows and counters in one transaction.

        With a voter filter the affected counter rows are locked before the
        ledger delete, so votes landing meanwhile are counted exactly once:
        either already in the recount, or added on top of it.
        """
        conditions = []
        if item_ids is not None:
            conditions.append(reaction_votes_table.c.item_id.in_(item_ids))
        if voter_ids is not None:
            conditions.append(reaction_votes_table.c.voter_id.in_(voter_ids))

        votes_stmt = delete(reaction_votes_table)
        if conditions:
            votes_stmt = votes_stmt.where(and_(*conditions))
        votes_stmt = votes_stmt.returning(reaction_votes_table.c.item_id)

        with logfire.span(
            "vote_store.bulk_erase",
            by_item=item_ids is not None,
            by_voter=voter_ids is not None,
        ):
            with storage_errors("bulk_erase"):
                async with self.session_factory.begin() as session:
                    if voter_ids is None:
                        # Counters go first so concurrent voters wait on their row locks
                        tallies_stmt = delete(reaction_tallies_table)
                        if item_ids is not None:
                            tallies_stmt = tallies_stmt.where(
                                reaction_tallies_table.c.item_id.in_(item_ids)
                            )
                        await session.execute(tallies_stmt)
                        result = await session.execute(votes_stmt)
                        return len(result.fetchall())

                    # Lock the counters first: a concurrent vote on these items
                    # then waits in its tally upsert until the recount commits
                    affected_stmt = select(reaction_votes_table.c.item_id).distinct()
                    if conditions:
                        affected_stmt = affected_stmt.where(and_(*conditions))
                    affected = set((await session.execute(affected_stmt)).scalars())
                    if affected:
                        await session.execute(
                            select(reaction_tallies_table.c.item_id)
                            .where(reaction_tallies_table.c.item_id.in_(affected))
                            .with_for_update()
                        )

                    rows = (await session.execute(votes_stmt)).fetchall()
                    affected.update(row.item_id for row in rows)
                    if affected:
                        await session.execute(_recount_stmt(affected))
                    return len(rows)


def _count_votes(reaction: ReactionKind):
    """Correlated count of an item's ledger rows of one reaction kind."""
    return (
        select(func.count())
        .select_from(reaction_votes_table)
        .where(
            reaction_votes_table.c.item_id == reaction_tallies_table.c.item_id,
            reaction_votes_table.c.reaction == reaction.value,
        )
        .scalar_subquery()
    )


def _recount_stmt(item_ids: set[int]):
    """Reset the given items' counters to what their ledger rows add up to."""
    return (
        update(reaction_tallies_table)
        .where(reaction_tallies_table.c.item_id.in_(item_ids))
        .values(
            like_count=_count_votes(ReactionKind.LIKE),
            dislike_count=_count_votes(ReactionKind.DISLIKE),
            updated_at=func.now(),
        )
    )
