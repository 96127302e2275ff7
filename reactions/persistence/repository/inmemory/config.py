"""In-memory reaction config repository for testing."""

from typing import Optional

from reactions.domain.repository import ReactionConfigRepository
from reactions.domain.value import ReactionMode


class InMemoryReactionConfigRepository(ReactionConfigRepository):
    """In-memory implementation of ReactionConfigRepository."""

    def __init__(self, mode: Optional[ReactionMode] = None) -> None:
        self._mode = mode

    async def get_mode(self) -> Optional[ReactionMode]:
        """Get the stored mode."""
        return self._mode

    async def set_mode(self, mode: ReactionMode) -> None:
        """Store the mode."""
        self._mode = mode
