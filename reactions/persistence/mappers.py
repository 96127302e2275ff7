"""Mappers for converting between database rows and domain models."""

from typing import Any, Dict, Iterable

from reactions.domain.model import ItemTally
from reactions.domain.value import ItemId, ReactionKind, Tally


def row_to_tally(row: Dict[str, Any]) -> Tally:
    """Convert a reaction_tallies row to a Tally value object.

    Args:
        row: Database row as dict

    Returns:
        Tally value object
    """
    return Tally(likes=row["like_count"], dislikes=row["dislike_count"])


def row_to_item_tally(row: Dict[str, Any]) -> ItemTally:
    """Convert a reaction_tallies row to an ItemTally entity.

    Args:
        row: Database row as dict

    Returns:
        ItemTally entity
    """
    return ItemTally(
        item_id=ItemId(row["item_id"]),
        tally=row_to_tally(row),
        updated_at=row["updated_at"],
    )


def reaction_counts_to_tally(rows: Iterable[Dict[str, Any]]) -> Tally:
    """Fold (reaction, count) rows of a GROUP BY query into a Tally.

    Args:
        rows: Rows with 'reaction' and 'count' keys

    Returns:
        Tally value object
    """
    counts = {row["reaction"]: row["count"] for row in rows}
    return Tally(
        likes=counts.get(ReactionKind.LIKE.value, 0),
        dislikes=counts.get(ReactionKind.DISLIKE.value, 0),
    )
