"""Get tally use case."""

from pydantic import BaseModel

from reactions.domain.service import ReactionService
from reactions.domain.value import ItemId


class GetTallyRequest(BaseModel):
    """Get tally request."""

    item_id: int


class GetTallyResponse(BaseModel):
    """Get tally response."""

    likes: int
    dislikes: int


class GetTallyUseCase:
    """Use case for reading an item's counts."""

    def __init__(self, reaction_service: ReactionService) -> None:
        self.reaction_service = reaction_service

    async def execute(self, request: GetTallyRequest) -> GetTallyResponse:
        tally = await self.reaction_service.get_tally(ItemId(request.item_id))
        return GetTallyResponse(likes=tally.likes, dislikes=tally.dislikes)
