"""Domain value objects for post reactions.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import NonNegativeInt, field_validator

from reactions.domain.value.common import RootValueObject, ValueObject


class ReactionKind(str, Enum):
    """Kind of reaction a voter can cast."""

    LIKE = "like"
    DISLIKE = "dislike"


class ReactionMode(str, Enum):
    """Which reaction kinds are currently accepted."""

    LIKE_ONLY = "like_only"
    LIKE_DISLIKE = "like_dislike"

    def allows(self, reaction: ReactionKind) -> bool:
        """Whether a new reaction of this kind may be recorded."""
        if self is ReactionMode.LIKE_ONLY:
            return reaction is ReactionKind.LIKE
        return True


class VoteOutcome(str, Enum):
    """Outcome of a vote attempt that reached storage."""

    VOTED = "voted"
    ALREADY_VOTED = "already_voted"


class Tally(ValueObject):
    """Like and dislike counts of an item."""

    likes: NonNegativeInt = 0
    dislikes: NonNegativeInt = 0

    def incremented(self, reaction: ReactionKind) -> "Tally":
        """Return a copy with one more reaction of the given kind."""
        if reaction is ReactionKind.LIKE:
            return Tally(likes=self.likes + 1, dislikes=self.dislikes)
        return Tally(likes=self.likes, dislikes=self.dislikes + 1)


class VoteResult(ValueObject):
    """Result of casting a vote.

    Duplicate votes are an expected outcome, not an error, and still carry
    the current tally so the caller can display it.
    """

    outcome: VoteOutcome
    tally: Tally

    @property
    def already_voted(self) -> bool:
        return self.outcome is VoteOutcome.ALREADY_VOTED


class GuestToken(RootValueObject[str]):
    """Opaque token identifying an anonymous visitor's browser.

    Must be 1-128 characters of letters, digits, '-' or '_'.
    """

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate guest token format."""
        if not re.fullmatch(r"[A-Za-z0-9_-]{1,128}", v):
            raise ValueError(
                "Guest token must be 1-128 characters of letters, digits, '-' or '_'"
            )
        return v
