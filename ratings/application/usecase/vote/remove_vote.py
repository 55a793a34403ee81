"""Remove vote use case."""

from pydantic import BaseModel

from ratings.domain.service import VoteService
from ratings.domain.value import VoteAction

from ..base import BaseUseCase
from .parsing import parse_caller_id, parse_review_id


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    review_id: str | None = None
    caller_id: str | None = None  # Resolved from the auth token, None if anonymous


class RemoveVoteResponse(BaseModel):
    """Remove vote response."""

    success: bool = True
    action: VoteAction = VoteAction.DELETED


class RemoveVoteUseCase(BaseUseCase[RemoveVoteRequest, RemoveVoteResponse]):
    """Use case for removing a vote from a review."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize remove vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: RemoveVoteRequest) -> RemoveVoteResponse:
        """Execute remove vote flow.

        Succeeds whether or not a vote existed.

        Args:
            request: Remove vote request

        Returns:
            Remove vote response

        Raises:
            ValidationError: If review_id is missing or malformed
            AuthRequiredError: If the caller is unauthenticated
            StoreError: If persistence fails
        """
        result = await self.vote_service.remove(
            caller_id=parse_caller_id(request.caller_id),
            review_id=parse_review_id(request.review_id),
        )
        return RemoveVoteResponse(action=result.action)
