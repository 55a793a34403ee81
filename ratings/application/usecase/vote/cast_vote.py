"""Cast vote use case."""

from typing import Optional

from pydantic import BaseModel

from ratings.domain.service import VoteService
from ratings.domain.value import VoteAction, VoteDirection

from ..base import BaseUseCase
from .parsing import parse_caller_id, parse_review_id


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    review_id: str | None = None
    vote_type: str | None = None
    caller_id: str | None = None  # Resolved from the auth token, None if anonymous


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    success: bool = True
    action: VoteAction
    vote_type: Optional[VoteDirection]


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for casting, switching, or toggling off a vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Action taken and resulting vote type

        Raises:
            ValidationError: If review_id or vote_type is missing or invalid
            AuthRequiredError: If the caller is unauthenticated
            StoreError: If persistence fails
        """
        result = await self.vote_service.cast_or_toggle(
            caller_id=parse_caller_id(request.caller_id),
            review_id=parse_review_id(request.review_id),
            direction=request.vote_type,
        )

        return CastVoteResponse(action=result.action, vote_type=result.direction)
