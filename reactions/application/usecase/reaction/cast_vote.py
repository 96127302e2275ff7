"""Cast vote use case."""

from pydantic import BaseModel, StrictInt

from reactions.application.usecase.base import BaseUseCase
from reactions.domain.service import ConfigService, ReactionService
from reactions.domain.value import ItemId, VoterId

THANKS_MESSAGE = "Thanks for your feedback!"
ALREADY_VOTED_MESSAGE = "You already voted on this item."


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    item_id: StrictInt
    reaction: str  # Validated by the domain service
    voter_id: str  # Resolved by the identity service


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    likes: int
    dislikes: int
    message: str
    already: bool = False


class CastVoteUseCase(BaseUseCase):
    """Use case for casting a reaction on an item."""

    def __init__(
        self, reaction_service: ReactionService, config_service: ConfigService
    ) -> None:
        """Initialize cast vote use case.

        Args:
            reaction_service: Reaction domain service
            config_service: Config domain service, source of the current mode
        """
        self.reaction_service = reaction_service
        self.config_service = config_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        The mode is read fresh for every vote.

        Args:
            request: Cast vote request

        Returns:
            Counts and message; ``already`` is set for duplicate votes

        Raises:
            InvalidRequestError: If the request is malformed
            ModeDisabledError: If the mode rejects the reaction
            StorageUnavailableError: If the store fails
        """
        mode = await self.config_service.current_mode()
        result = await self.reaction_service.cast_vote(
            voter_id=VoterId(request.voter_id),
            item_id=ItemId(request.item_id),
            reaction_kind=request.reaction,
            current_mode=mode,
        )

        return CastVoteResponse(
            likes=result.tally.likes,
            dislikes=result.tally.dislikes,
            message=ALREADY_VOTED_MESSAGE if result.already_voted else THANKS_MESSAGE,
            already=result.already_voted,
        )
