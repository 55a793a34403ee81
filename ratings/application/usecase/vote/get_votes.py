"""Get votes use case."""

from pydantic import BaseModel, Field

from ratings.domain.service import VoteService
from ratings.domain.value import VoteDirection

from ..base import BaseUseCase
from .parsing import parse_caller_id, parse_review_ids, split_review_ids


class GetVotesRequest(BaseModel):
    """Get votes request."""

    review_ids: str | None = None  # Comma-separated review IDs
    caller_id: str | None = None  # Resolved from the auth token, None if anonymous


class GetVotesResponse(BaseModel):
    """Get votes response."""

    success: bool = True
    votes: dict[str, VoteDirection] = Field(default_factory=dict)


class GetVotesUseCase(BaseUseCase[GetVotesRequest, GetVotesResponse]):
    """Use case for fetching the caller's votes on a page of reviews."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize get votes use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: GetVotesRequest) -> GetVotesResponse:
        """Execute get votes flow.

        Anonymous viewers get an empty mapping rather than an error, whatever
        the IDs look like.

        Raises:
            ValidationError: If review_ids is missing, or malformed for a
                signed-in caller
        """
        caller_id = parse_caller_id(request.caller_id)
        if caller_id is None:
            split_review_ids(request.review_ids)
            return GetVotesResponse()

        review_ids = parse_review_ids(request.review_ids)
        votes = await self.vote_service.batch_get_votes(caller_id, review_ids)
        return GetVotesResponse(
            votes={str(review_id): direction for review_id, direction in votes.items()}
        )
