"""Optimistic client-side vote state.

One controller per UI surface (a page listing reviews). Mutations are
applied locally before the server answers and rolled back exactly if the
request fails.
"""

import asyncio
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Optional

import logfire

from ratings.adapter.error import VoteApiError
from ratings.adapter.vote_api import HttpVoteApiClient, VoteApiClient
from ratings.config import ClientSettings
from ratings.domain.value import ReviewId, VoteDirection, VoteTally, next_direction
from ratings.domain.value.common import ValueObject


class VoteSnapshot(ValueObject):
    """State of one review captured before an optimistic mutation."""

    direction: Optional[VoteDirection] = None
    counts: VoteTally = VoteTally()


def _log_notice(message: str) -> None:
    logfire.warn("Vote notice", message=message)


class ClientVoteController:
    """Optimistic vote state machine for one UI surface.

    At most one mutation per review is in flight; requests for different
    reviews are independent and may overlap.
    """

    CAST_FAILED = "Failed to cast vote. Please try again."
    REMOVE_FAILED = "Failed to remove vote. Please try again."

    def __init__(
        self,
        api_client: VoteApiClient,
        review_ids: Iterable[ReviewId] = (),
        initial_counts: Mapping[ReviewId, VoteTally] | None = None,
        notify: Callable[[str], None] | None = None,
        on_vote_success: Callable[[ReviewId, Optional[VoteDirection]], None]
        | None = None,
        on_vote_error: Callable[[VoteApiError], None] | None = None,
        request_timeout: float | None = 10.0,
    ) -> None:
        """Initialize vote controller.

        Args:
            api_client: Client for the vote resource
            review_ids: Reviews shown on this surface, fetched on mount
            initial_counts: Server-rendered tallies to seed local counts
            notify: Shows a transient user-visible message (a "toast")
            on_vote_success: Called with the review and server-declared direction
            on_vote_error: Called with the failure after rollback
            request_timeout: Seconds before an in-flight request counts as failed
        """
        self.api_client = api_client
        self.review_ids = list(review_ids)
        self.votes: dict[ReviewId, Optional[VoteDirection]] = {}
        self.vote_counts: dict[ReviewId, VoteTally] = dict(initial_counts or {})
        self.notify = notify or _log_notice
        self.on_vote_success = on_vote_success
        self.on_vote_error = on_vote_error
        self.request_timeout = request_timeout

        # Presence marks a review as pending; the value is its rollback snapshot
        self._operations: dict[ReviewId, VoteSnapshot] = {}
        self._refreshes = 0
        # Mutations started per review, so a refresh can tell what moved under it
        self._mutations: dict[ReviewId, int] = {}

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        auth_token: str | None = None,
        **kwargs: Any,
    ) -> "ClientVoteController":
        """Build a controller talking HTTP to the configured vote API.

        Args:
            settings: Client settings (base URL and request timeout)
            auth_token: JWT identifying the caller (None for anonymous)
            **kwargs: Passed through to the controller
        """
        return cls(
            HttpVoteApiClient.from_settings(settings, auth_token=auth_token),
            request_timeout=settings.request_timeout,
            **kwargs,
        )

    async def __aenter__(self) -> "ClientVoteController":
        await self.refresh_votes()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None

    @property
    def is_loading(self) -> bool:
        """True while a refresh is in flight."""
        return self._refreshes > 0

    def is_pending(self, review_id: ReviewId) -> bool:
        """Whether a mutation for this review is in flight."""
        return review_id in self._operations

    def get_user_vote(self, review_id: ReviewId) -> Optional[VoteDirection]:
        """Current local direction for a review (None for no vote)."""
        return self.votes.get(review_id)

    def get_vote_counts(self, review_id: ReviewId) -> VoteTally:
        """Current local tally for a review."""
        return self.vote_counts.get(review_id, VoteTally())

    async def cast_vote(self, review_id: ReviewId, direction: VoteDirection) -> None:
        """Cast a vote optimistically.

        Casting the direction already held toggles the vote off, matching
        what the server will do.
        """
        target = next_direction(self.get_user_vote(review_id), direction)
        if not self._begin(review_id, target):
            return

        try:
            response = await self._send(self.api_client.cast_vote(review_id, direction))
        except VoteApiError as e:
            self._fail(review_id, e, self.CAST_FAILED)
            return
        except BaseException:
            self._rollback(review_id)
            raise

        self._commit(review_id, response.vote_type)

    async def remove_vote(self, review_id: ReviewId) -> None:
        """Remove a vote optimistically."""
        if not self._begin(review_id, None):
            return

        try:
            await self._send(self.api_client.remove_vote(review_id))
        except VoteApiError as e:
            self._fail(review_id, e, self.REMOVE_FAILED)
            return
        except BaseException:
            self._rollback(review_id)
            raise

        self._commit(review_id, None)

    async def toggle_vote(self, review_id: ReviewId, direction: VoteDirection) -> None:
        """Remove the vote if it already has this direction, else cast it."""
        if self.get_user_vote(review_id) == direction:
            await self.remove_vote(review_id)
        else:
            await self.cast_vote(review_id, direction)

    async def refresh_votes(self, review_ids: Iterable[ReviewId] | None = None) -> None:
        """Re-sync local directions from the server.

        Reviews mutated after the refresh started keep their local state,
        whether the mutation is still in flight or already confirmed. On
        failure local state is left untouched.
        """
        ids = list(review_ids) if review_ids is not None else list(self.review_ids)
        if not ids:
            return

        started = {review_id: self._mutations.get(review_id, 0) for review_id in ids}
        self._refreshes += 1
        try:
            server_votes = await self._send(self.api_client.fetch_votes(ids))
        except VoteApiError as e:
            logfire.warn("Failed to refresh votes", error=str(e), count=len(ids))
            if self.on_vote_error:
                self.on_vote_error(e)
            return
        finally:
            self._refreshes -= 1

        for review_id in ids:
            if (
                review_id in self._operations
                or self._mutations.get(review_id, 0) != started[review_id]
            ):
                continue
            self.votes[review_id] = server_votes.get(review_id)

    async def _send(self, request):
        try:
            return await asyncio.wait_for(request, timeout=self.request_timeout)
        except asyncio.TimeoutError as e:
            raise VoteApiError(
                f"Vote request timed out after {self.request_timeout}s"
            ) from e

    def _begin(self, review_id: ReviewId, target: Optional[VoteDirection]) -> bool:
        if review_id in self._operations:
            logfire.debug("Vote already pending, ignoring", review_id=str(review_id))
            return False

        previous = self.get_user_vote(review_id)
        counts = self.get_vote_counts(review_id)
        self._operations[review_id] = VoteSnapshot(direction=previous, counts=counts)
        self._mutations[review_id] = self._mutations.get(review_id, 0) + 1

        self.votes[review_id] = target
        self.vote_counts[review_id] = counts.transition(previous, target)
        return True

    def _commit(self, review_id: ReviewId, direction: Optional[VoteDirection]) -> None:
        # Server's direction wins; counts stay as the local projection
        self.votes[review_id] = direction
        del self._operations[review_id]

        if self.on_vote_success:
            self.on_vote_success(review_id, direction)

    def _rollback(self, review_id: ReviewId) -> None:
        snapshot = self._operations.pop(review_id)
        self.votes[review_id] = snapshot.direction
        self.vote_counts[review_id] = snapshot.counts

    def _fail(self, review_id: ReviewId, error: VoteApiError, message: str) -> None:
        self._rollback(review_id)
        logfire.warn(
            "Vote request failed, rolled back",
            review_id=str(review_id),
            error=str(error),
        )
        self.notify(message)
        if self.on_vote_error:
            self.on_vote_error(error)
