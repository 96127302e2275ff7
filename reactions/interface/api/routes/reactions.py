"""Reaction routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, StrictInt

from reactions.application.usecase.reaction import (
    CastVoteRequest,
    CastVoteUseCase,
    GetReactionStatusRequest,
    GetReactionStatusResponse,
    GetReactionStatusUseCase,
    GetTallyRequest,
    GetTallyResponse,
    GetTallyUseCase,
)
from reactions.config import AuthSettings
from reactions.domain.service import VoterIdentityService
from reactions.interface.error import UnauthenticatedError

router = APIRouter(tags=["reactions"], route_class=DishkaRoute)


class ReactBody(BaseModel):
    """Body of a vote request."""

    item_id: StrictInt
    reaction: str


class ReactResponse(BaseModel):
    """Successful vote."""

    likes: int
    dislikes: int
    message: str


class AlreadyVotedResponse(BaseModel):
    """Duplicate vote, with the current counts."""

    message: str
    already: bool = True
    likes: int
    dislikes: int


class MessageResponse(BaseModel):
    """Error body."""

    message: str


def resolve_voter(
    request: Request,
    identity_service: VoterIdentityService,
    auth_settings: AuthSettings,
) -> str | None:
    """Resolve the voter id from the request cookies."""
    return identity_service.resolve(
        auth_token=request.cookies.get(auth_settings.auth_cookie_name),
        guest_token=request.cookies.get(auth_settings.guest_cookie_name),
    )


@router.post(
    "/react",
    response_model=ReactResponse,
    responses={
        400: {"model": MessageResponse},
        401: {"model": MessageResponse},
        403: {"model": MessageResponse},
        409: {"model": AlreadyVotedResponse},
        500: {"model": MessageResponse},
    },
)
async def react(
    body: ReactBody,
    request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    identity_service: FromDishka[VoterIdentityService],
    auth_settings: FromDishka[AuthSettings],
):
    """Cast a like or dislike on an item.

    Requires a voter identity (auth cookie or guest cookie).

    Args:
        body: Item id and reaction
        request: Incoming request, for cookies
        cast_vote_use_case: Cast vote use case from DI
        identity_service: Voter identity service from DI
        auth_settings: Cookie names

    Returns:
        200 with new counts, or 409 with current counts for a duplicate vote

    Raises:
        UnauthenticatedError: If no voter identity resolves
    """
    voter_id = resolve_voter(request, identity_service, auth_settings)
    if not voter_id:
        raise UnauthenticatedError("Voter identity required to react")

    response = await cast_vote_use_case.execute(
        CastVoteRequest(item_id=body.item_id, reaction=body.reaction, voter_id=voter_id)
    )

    if response.already:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=AlreadyVotedResponse(
                message=response.message,
                likes=response.likes,
                dislikes=response.dislikes,
            ).model_dump(),
        )

    return ReactResponse(
        likes=response.likes, dislikes=response.dislikes, message=response.message
    )


@router.get("/tally", response_model=GetTallyResponse)
async def get_tally(
    item_id: int,
    get_tally_use_case: FromDishka[GetTallyUseCase],
) -> GetTallyResponse:
    """Get an item's like and dislike counts.

    Args:
        item_id: Item id
        get_tally_use_case: Get tally use case from DI

    Returns:
        Current counts, zero for items nobody reacted to
    """
    return await get_tally_use_case.execute(GetTallyRequest(item_id=item_id))


@router.get("/react/status", response_model=GetReactionStatusResponse)
async def get_reaction_status(
    item_id: int,
    request: Request,
    status_use_case: FromDishka[GetReactionStatusUseCase],
    identity_service: FromDishka[VoterIdentityService],
    auth_settings: FromDishka[AuthSettings],
) -> GetReactionStatusResponse:
    """Get what a reaction bar needs on page load.

    Works without an identity; ``has_voted`` is then false.
    """
    voter_id = resolve_voter(request, identity_service, auth_settings)
    return await status_use_case.execute(
        GetReactionStatusRequest(item_id=item_id, voter_id=voter_id)
    )
