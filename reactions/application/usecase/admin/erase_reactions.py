"""Erase reactions use case."""

from pydantic import BaseModel, StrictInt

from reactions.application.usecase.base import BaseUseCase
from reactions.domain.service import ReactionService


class EraseReactionsRequest(BaseModel):
    """Erase reactions request.

    Omitting both filters erases everything.
    """

    item_ids: list[StrictInt] | None = None
    voter_ids: list[str] | None = None


class EraseReactionsResponse(BaseModel):
    """Erase reactions response."""

    deleted: int


class EraseReactionsUseCase(BaseUseCase):
    """Use case for the administrative bulk erase."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize erase reactions use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: EraseReactionsRequest) -> EraseReactionsResponse:
        """Execute erase flow.

        Returns:
            Number of vote records deleted

        Raises:
            InvalidRequestError: If a filter is empty or malformed
        """
        deleted = await self.reaction_service.erase(
            item_ids=request.item_ids, voter_ids=request.voter_ids
        )
        return EraseReactionsResponse(deleted=deleted)
