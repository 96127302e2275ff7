"""Get reaction status use case."""

from pydantic import BaseModel

from reactions.domain.service import ConfigService, ReactionService
from reactions.domain.value import ItemId, ReactionMode, VoterId


class GetReactionStatusRequest(BaseModel):
    """Get reaction status request."""

    item_id: int
    voter_id: str | None = None  # None for visitors without an identity


class GetReactionStatusResponse(BaseModel):
    """Everything a reaction bar needs on page load."""

    likes: int
    dislikes: int
    has_voted: bool
    mode: ReactionMode


class GetReactionStatusUseCase:
    """Use case for loading the state of an item's reaction bar."""

    def __init__(
        self, reaction_service: ReactionService, config_service: ConfigService
    ) -> None:
        """Initialize get reaction status use case.

        Args:
            reaction_service: Reaction domain service
            config_service: Config domain service
        """
        self.reaction_service = reaction_service
        self.config_service = config_service

    async def execute(
        self, request: GetReactionStatusRequest
    ) -> GetReactionStatusResponse:
        """Execute get reaction status flow.

        Args:
            request: Item and optional voter

        Returns:
            Counts, whether this voter already reacted, and the current mode

        Raises:
            InvalidRequestError: If the item id is malformed
        """
        item_id = ItemId(request.item_id)
        tally = await self.reaction_service.get_tally(item_id)

        has_voted = False
        if request.voter_id:
            has_voted = await self.reaction_service.has_voted(
                VoterId(request.voter_id), item_id
            )

        return GetReactionStatusResponse(
            likes=tally.likes,
            dislikes=tally.dislikes,
            has_voted=has_voted,
            mode=await self.config_service.current_mode(),
        )
