"""Reaction configuration repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from reactions.domain.value import ReactionMode


class ReactionConfigRepository(ABC):
    """Repository for admin-controlled reaction settings."""

    @abstractmethod
    async def get_mode(self) -> Optional[ReactionMode]:
        """Get the stored mode.

        Returns:
            The stored mode, None if no mode was ever stored
        """
        pass

    @abstractmethod
    async def set_mode(self, mode: ReactionMode) -> None:
        """Store the mode.

        Args:
            mode: New mode
        """
        pass
