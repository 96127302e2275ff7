"""Reaction use cases."""

from .cast_vote import (
    ALREADY_VOTED_MESSAGE,
    THANKS_MESSAGE,
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from .get_status import (
    GetReactionStatusRequest,
    GetReactionStatusResponse,
    GetReactionStatusUseCase,
)
from .get_tally import GetTallyRequest, GetTallyResponse, GetTallyUseCase

__all__ = [
    "ALREADY_VOTED_MESSAGE",
    "THANKS_MESSAGE",
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetReactionStatusRequest",
    "GetReactionStatusResponse",
    "GetReactionStatusUseCase",
    "GetTallyRequest",
    "GetTallyResponse",
    "GetTallyUseCase",
]
