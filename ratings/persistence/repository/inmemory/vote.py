"""In-memory vote repository for testing."""

from collections.abc import Collection
from datetime import datetime
from typing import Optional

from ratings.domain.error import ConflictError, StoreError
from ratings.domain.model.vote import Vote
from ratings.domain.repository.vote import VoteRepository
from ratings.domain.value import CallerId, DisplayId, ReviewId, VoteDirection, VoteId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Keyed by (review_id, caller_id), which gives the same uniqueness
    guarantee as the unique_vote_per_caller constraint.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[ReviewId, CallerId], Vote] = {}

    def all(self) -> list[Vote]:
        """Return every stored vote."""
        return list(self._votes.values())

    async def find_one(
        self, review_id: ReviewId, caller_id: CallerId
    ) -> Optional[Vote]:
        """Find a caller's vote on a review."""
        return self._votes.get((review_id, caller_id))

    async def insert(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            ConflictError: If a vote already exists for this review/caller
        """
        key = (vote.review_id, vote.caller_id)
        if key in self._votes:
            raise ConflictError(str(vote.review_id), str(vote.caller_id))

        self._votes[key] = vote
        return vote

    async def update_direction(
        self,
        vote_id: VoteId,
        direction: VoteDirection,
        timestamp: datetime,
        display_id: DisplayId,
    ) -> Vote:
        """Switch a vote's direction in place."""
        for key, vote in self._votes.items():
            if vote.id == vote_id:
                updated = vote.evolve(
                    direction=direction,
                    created_at=timestamp,
                    display_id=display_id,
                )
                self._votes[key] = updated
                return updated
        raise StoreError("update_direction")

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote by ID."""
        self._votes = {k: v for k, v in self._votes.items() if v.id != vote_id}

    async def find_many(
        self, review_ids: Collection[ReviewId], caller_id: CallerId
    ) -> list[Vote]:
        """Find a caller's votes on several reviews (batch query)."""
        if not review_ids:
            return []

        wanted = set(review_ids)
        return [
            v
            for v in self._votes.values()
            if v.caller_id == caller_id and v.review_id in wanted
        ]
