"""Vote API client.

Talks to the ``/api/ratings/vote`` resource on behalf of a UI surface.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any
from uuid import UUID

import httpx
import logfire
from pydantic import ValidationError as PydanticValidationError

from ratings.adapter.error import VoteApiError
from ratings.application.usecase.vote import (
    CastVoteResponse,
    GetVotesResponse,
    RemoveVoteResponse,
)
from ratings.config import ClientSettings
from ratings.domain.value import ReviewId, VoteDirection
from ratings.util.observability import instrument_httpx


class VoteApiClient(ABC):
    """Contract the client-side vote controller depends on."""

    @abstractmethod
    async def cast_vote(
        self, review_id: ReviewId, direction: VoteDirection
    ) -> CastVoteResponse:
        """Cast or toggle a vote.

        Raises:
            VoteApiError: If the call did not fully succeed
        """
        pass

    @abstractmethod
    async def remove_vote(self, review_id: ReviewId) -> RemoveVoteResponse:
        """Remove a vote.

        Raises:
            VoteApiError: If the call did not fully succeed
        """
        pass

    @abstractmethod
    async def fetch_votes(
        self, review_ids: Sequence[ReviewId]
    ) -> dict[ReviewId, VoteDirection]:
        """Fetch the caller's votes on the given reviews.

        Raises:
            VoteApiError: If the call did not fully succeed
        """
        pass


class HttpVoteApiClient(VoteApiClient):
    """httpx implementation of VoteApiClient."""

    PATH = "/api/ratings/vote"

    def __init__(
        self,
        base_url: str,
        auth_token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize vote API client.

        Args:
            base_url: API server base URL
            auth_token: JWT sent as the auth_token cookie (None for anonymous)
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (e.g. ASGI or mock transport)
        """
        self.base_url = base_url
        self.auth_token = auth_token
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(
        cls, settings: ClientSettings, auth_token: str | None = None
    ) -> "HttpVoteApiClient":
        """Build a client from client settings."""
        return cls(
            base_url=settings.base_url,
            auth_token=auth_token,
            timeout=settings.request_timeout,
        )

    async def _request(
        self,
        method: str,
        *,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        cookies = {"auth_token": self.auth_token} if self.auth_token else None

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                cookies=cookies,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                instrument_httpx(client)
                response = await client.request(
                    method, self.PATH, params=params, json=json
                )
        except httpx.HTTPError as e:
            logfire.error("Vote API HTTP error", method=method, error=str(e))
            raise VoteApiError(f"HTTP error during vote request: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            message = data.get("error") if isinstance(data, dict) else None
            logfire.warn(
                "Vote API request failed",
                method=method,
                status_code=response.status_code,
                error=message,
            )
            raise VoteApiError(
                message or f"Vote request failed: {response.status_code}",
                status_code=response.status_code,
            )

        if not isinstance(data, dict):
            raise VoteApiError(
                "Vote API returned an unreadable response",
                status_code=response.status_code,
            )
        if not data.get("success"):
            raise VoteApiError(
                data.get("error") or "Vote request was not successful",
                status_code=response.status_code,
            )

        return data

    async def cast_vote(
        self, review_id: ReviewId, direction: VoteDirection
    ) -> CastVoteResponse:
        """Cast or toggle a vote."""
        data = await self._request(
            "POST", json={"review_id": str(review_id), "vote_type": direction.value}
        )
        try:
            return CastVoteResponse.model_validate(data)
        except PydanticValidationError as e:
            raise VoteApiError(f"Unexpected cast vote response: {e}") from e

    async def remove_vote(self, review_id: ReviewId) -> RemoveVoteResponse:
        """Remove a vote."""
        data = await self._request("DELETE", json={"review_id": str(review_id)})
        try:
            return RemoveVoteResponse.model_validate(data)
        except PydanticValidationError as e:
            raise VoteApiError(f"Unexpected remove vote response: {e}") from e

    async def fetch_votes(
        self, review_ids: Sequence[ReviewId]
    ) -> dict[ReviewId, VoteDirection]:
        """Fetch the caller's votes on the given reviews."""
        if not review_ids:
            return {}

        data = await self._request(
            "GET", params={"review_ids": ",".join(str(rid) for rid in review_ids)}
        )
        try:
            response = GetVotesResponse.model_validate(data)
            return {
                ReviewId(UUID(review_id)): direction
                for review_id, direction in response.votes.items()
            }
        except (PydanticValidationError, ValueError) as e:
            raise VoteApiError(f"Unexpected votes response: {e}") from e
