"""Vote domain service."""

from collections.abc import Collection
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

import logfire

from ratings.domain.error import (
    AuthRequiredError,
    ConflictError,
    StoreError,
    ValidationError,
)
from ratings.domain.model.vote import Vote
from ratings.domain.repository import VoteRepository
from ratings.domain.value import (
    CallerId,
    ReviewId,
    VoteAction,
    VoteDirection,
    VoteId,
    next_direction,
)
from ratings.domain.value.common import ValueObject

from .base import Service
from .display_identity_service import DisplayIdentityService


class CastVoteResult(ValueObject):
    """Canonical state after a cast."""

    action: VoteAction
    direction: Optional[VoteDirection]


class RemoveVoteResult(ValueObject):
    """Outcome of an explicit removal."""

    action: VoteAction = VoteAction.DELETED
    removed: bool


class VoteService(Service):
    """Domain service for the per-caller, per-review vote state machine.

    States per (review, caller): no vote, helpful, unhelpful. Casting the
    held direction removes the vote, casting the other one switches it in
    place, casting on no vote inserts.
    """

    MAX_ATTEMPTS = 3

    def __init__(
        self,
        vote_repository: VoteRepository,
        display_identity_service: DisplayIdentityService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            display_identity_service: Source of rotating display identities
        """
        self.vote_repository = vote_repository
        self.display_identity_service = display_identity_service

    @staticmethod
    def _parse_direction(direction: VoteDirection | str | None) -> VoteDirection:
        if isinstance(direction, VoteDirection):
            return direction
        try:
            return VoteDirection(direction)
        except ValueError:
            raise ValidationError('vote_type must be "helpful" or "unhelpful"')

    async def cast_or_toggle(
        self,
        caller_id: CallerId | None,
        review_id: ReviewId | None,
        direction: VoteDirection | str | None,
    ) -> CastVoteResult:
        """Cast, switch, or toggle off a caller's vote on a review.

        Args:
            caller_id: Resolved caller identity (None if unauthenticated)
            review_id: Review being voted on
            direction: Requested direction

        Returns:
            The action taken and the resulting direction

        Raises:
            ValidationError: If review_id/direction is missing or invalid
            AuthRequiredError: If the caller is unauthenticated
            StoreError: If the store fails
        """
        with self.span(
            "cast_or_toggle", review_id=str(review_id), direction=str(direction)
        ):
            if review_id is None or not direction:
                raise ValidationError("review_id and vote_type are required")
            requested = self._parse_direction(direction)

            if caller_id is None:
                logfire.warn("Unauthenticated vote attempt", review_id=str(review_id))
                raise AuthRequiredError()

            conflicted = False
            for attempt in range(self.MAX_ATTEMPTS):
                existing = await self.vote_repository.find_one(review_id, caller_id)

                if existing is None:
                    try:
                        await self._create(review_id, caller_id, requested)
                    except ConflictError:
                        # A concurrent request inserted first; resolve against its row
                        logfire.warn(
                            "Concurrent vote insert, retrying as update",
                            review_id=str(review_id),
                            attempt=attempt,
                        )
                        conflicted = True
                        continue
                    logfire.info(
                        "Vote created",
                        review_id=str(review_id),
                        direction=requested.value,
                    )
                    return CastVoteResult(action=VoteAction.CREATED, direction=requested)

                target = requested if conflicted else next_direction(
                    existing.direction, requested
                )

                if target is None:
                    await self.vote_repository.delete(existing.id)
                    logfire.info("Vote toggled off", review_id=str(review_id))
                    return CastVoteResult(action=VoteAction.REMOVED, direction=None)

                await self._switch(existing, target)
                logfire.info(
                    "Vote updated",
                    review_id=str(review_id),
                    previous=existing.direction.value,
                    direction=target.value,
                )
                return CastVoteResult(action=VoteAction.UPDATED, direction=target)

            logfire.error(
                "Vote cast gave up after repeated conflicts", review_id=str(review_id)
            )
            raise StoreError("cast_or_toggle")

    async def _create(
        self, review_id: ReviewId, caller_id: CallerId, direction: VoteDirection
    ) -> Vote:
        vote = Vote(
            id=VoteId(uuid4()),
            review_id=review_id,
            caller_id=caller_id,
            display_id=self.display_identity_service.next_display_identity(caller_id),
            direction=direction,
            created_at=datetime.now(timezone.utc),
        )
        return await self.vote_repository.insert(vote)

    async def _switch(self, vote: Vote, direction: VoteDirection) -> Vote:
        return await self.vote_repository.update_direction(
            vote_id=vote.id,
            direction=direction,
            timestamp=datetime.now(timezone.utc),
            display_id=self.display_identity_service.next_display_identity(
                vote.caller_id
            ),
        )

    async def remove(
        self, caller_id: CallerId | None, review_id: ReviewId | None
    ) -> RemoveVoteResult:
        """Remove a caller's vote on a review.

        Removing a vote that does not exist succeeds (idempotent).

        Args:
            caller_id: Resolved caller identity (None if unauthenticated)
            review_id: Review whose vote is removed

        Returns:
            Removal result

        Raises:
            ValidationError: If review_id is missing
            AuthRequiredError: If the caller is unauthenticated
            StoreError: If the store fails
        """
        with self.span("remove", review_id=str(review_id)):
            if review_id is None:
                raise ValidationError("review_id is required")
            if caller_id is None:
                logfire.warn(
                    "Unauthenticated vote removal attempt", review_id=str(review_id)
                )
                raise AuthRequiredError()

            existing = await self.vote_repository.find_one(review_id, caller_id)
            if existing is None:
                logfire.info("No vote to remove", review_id=str(review_id))
                return RemoveVoteResult(removed=False)

            await self.vote_repository.delete(existing.id)
            logfire.info("Vote removed", review_id=str(review_id))
            return RemoveVoteResult(removed=True)

    async def batch_get_votes(
        self, caller_id: CallerId | None, review_ids: Collection[ReviewId]
    ) -> dict[ReviewId, VoteDirection]:
        """Look up a caller's votes on several reviews.

        Args:
            caller_id: Resolved caller identity (None if unauthenticated)
            review_ids: Reviews to check

        Returns:
            Mapping of review ID to direction; reviews without a vote are
            absent. Empty for anonymous viewers.
        """
        if caller_id is None or not review_ids:
            return {}

        with self.span("batch_get_votes", count=len(review_ids)):
            # Batch query to fetch all votes at once (avoid N+1)
            votes = await self.vote_repository.find_many(set(review_ids), caller_id)
            return {vote.review_id: vote.direction for vote in votes}
