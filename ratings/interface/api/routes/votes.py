"""Vote routes.

A single method-routed resource: POST casts/toggles, GET batch-reads the
caller's votes, DELETE removes. The caller is resolved from the auth_token
cookie; an unresolvable token means "unauthenticated", never an error here.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query
from pydantic import BaseModel

from ratings.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVotesRequest,
    GetVotesResponse,
    GetVotesUseCase,
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
)
from ratings.domain.error import DomainError
from ratings.domain.service import JWTService
from ratings.interface.api.errors import http_error_for

router = APIRouter(prefix="/api/ratings", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    review_id: str | None = None
    vote_type: str | None = None


class RemoveVoteAPIRequest(BaseModel):
    """API request for removing a vote."""

    review_id: str | None = None


def _caller(jwt_service: JWTService, auth_token: str | None) -> str | None:
    caller_id = jwt_service.resolve_caller(auth_token)
    return str(caller_id) if caller_id else None


@router.post("/vote", response_model=CastVoteResponse)
async def cast_vote(
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Cast, switch, or toggle off a vote on a review.

    Requires authentication.

    Raises:
        HTTPException: 400 on invalid input, 401 if not authenticated,
            500 on store failure
    """
    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                review_id=request.review_id,
                vote_type=request.vote_type,
                caller_id=_caller(jwt_service, auth_token),
            )
        )
    except DomainError as e:
        raise http_error_for(e, "Failed to cast vote") from e


@router.get("/vote", response_model=GetVotesResponse)
async def get_votes(
    get_votes_use_case: FromDishka[GetVotesUseCase],
    jwt_service: FromDishka[JWTService],
    review_ids: str | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetVotesResponse:
    """Fetch the caller's votes on a comma-separated list of reviews.

    Anonymous callers get an empty mapping.

    Raises:
        HTTPException: 400 if review_ids is missing, 500 on store failure
    """
    try:
        return await get_votes_use_case.execute(
            GetVotesRequest(
                review_ids=review_ids,
                caller_id=_caller(jwt_service, auth_token),
            )
        )
    except DomainError as e:
        raise http_error_for(e, "Failed to fetch votes") from e


@router.delete("/vote", response_model=RemoveVoteResponse)
async def remove_vote(
    request: RemoveVoteAPIRequest,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RemoveVoteResponse:
    """Remove the caller's vote on a review.

    Succeeds even if there was no vote to remove.

    Raises:
        HTTPException: 400 if review_id is missing, 401 if not authenticated,
            500 on store failure
    """
    try:
        return await remove_vote_use_case.execute(
            RemoveVoteRequest(
                review_id=request.review_id,
                caller_id=_caller(jwt_service, auth_token),
            )
        )
    except DomainError as e:
        raise http_error_for(e, "Failed to delete vote") from e
