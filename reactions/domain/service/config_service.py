"""Reaction configuration domain service."""

import logfire

from reactions.config import ReactionSettings
from reactions.domain.error import InvalidRequestError
from reactions.domain.repository import ReactionConfigRepository
from reactions.domain.value import ReactionMode

from .base import Service


class ConfigService(Service):
    """Domain service for admin-controlled reaction settings."""

    def __init__(
        self,
        config_repository: ReactionConfigRepository,
        reaction_settings: ReactionSettings,
    ) -> None:
        """Initialize config service.

        Args:
            config_repository: Reaction config repository
            reaction_settings: Defaults used until an admin stores a value
        """
        self.config_repository = config_repository
        self.reaction_settings = reaction_settings

    async def current_mode(self) -> ReactionMode:
        """Get the mode in effect right now.

        Read on every request, so admin changes apply to the next vote.
        """
        stored = await self.config_repository.get_mode()
        if stored is not None:
            return stored
        return ReactionMode(self.reaction_settings.default_mode)

    async def update_mode(self, mode: ReactionMode | str) -> ReactionMode:
        """Store a new mode.

        Existing dislike counts are kept when switching to like-only.

        Raises:
            InvalidRequestError: If the mode is unknown
        """
        try:
            new_mode = ReactionMode(mode)
        except ValueError:
            raise InvalidRequestError("Mode must be 'like_only' or 'like_dislike'")

        with logfire.span("config_service.update_mode", mode=new_mode.value):
            await self.config_repository.set_mode(new_mode)
            logfire.info("Reaction mode updated", mode=new_mode.value)
            return new_mode
