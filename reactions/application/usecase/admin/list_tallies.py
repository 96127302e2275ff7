"""List tallies use case (admin dashboard)."""

from datetime import datetime

from pydantic import BaseModel

from reactions.domain.service import ReactionService


class ListTalliesRequest(BaseModel):
    """List tallies request."""

    limit: int = 20


class ItemTallyResponse(BaseModel):
    """Counters of one item."""

    item_id: int
    likes: int
    dislikes: int
    updated_at: datetime


class ListTalliesResponse(BaseModel):
    """List tallies response."""

    items: list[ItemTallyResponse]


class ListTalliesUseCase:
    """Use case for the reactions dashboard: counts per item."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize list tallies use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: ListTalliesRequest) -> ListTalliesResponse:
        """Execute list tallies flow.

        Returns:
            Items most recently voted on first

        Raises:
            InvalidRequestError: If the limit is out of range
        """
        tallies = await self.reaction_service.list_tallies(request.limit)
        return ListTalliesResponse(
            items=[
                ItemTallyResponse(
                    item_id=t.item_id,
                    likes=t.tally.likes,
                    dislikes=t.tally.dislikes,
                    updated_at=t.updated_at,
                )
                for t in tallies
            ]
        )
