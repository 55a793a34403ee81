"""Vote repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Collection
from datetime import datetime
from typing import List, Optional

from ratings.domain.model.vote import Vote
from ratings.domain.value import CallerId, DisplayId, ReviewId, VoteDirection, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer. All lookups are point
    lookups on the (review_id, caller_id) key or the vote id.
    """

    @abstractmethod
    async def find_one(
        self, review_id: ReviewId, caller_id: CallerId
    ) -> Optional[Vote]:
        """Find a caller's vote on a review.

        Args:
            review_id: The review's ID
            caller_id: The caller's durable identity

        Returns:
            The vote if found, None otherwise

        Raises:
            StoreError: If the lookup itself fails
        """
        pass

    @abstractmethod
    async def insert(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Args:
            vote: The vote to insert

        Returns:
            The inserted vote

        Raises:
            ConflictError: If a vote already exists for this review/caller
            StoreError: On any other persistence failure
        """
        pass

    @abstractmethod
    async def update_direction(
        self,
        vote_id: VoteId,
        direction: VoteDirection,
        timestamp: datetime,
        display_id: DisplayId,
    ) -> Vote:
        """Switch a vote's direction in place.

        Args:
            vote_id: The vote to update
            direction: New direction
            timestamp: New created_at ("last modified")
            display_id: Refreshed anonymous display identity

        Returns:
            The updated vote

        Raises:
            StoreError: If the vote is gone or the update fails
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> None:
        """Physically delete a vote.

        Args:
            vote_id: The vote ID to delete
        """
        pass

    @abstractmethod
    async def find_many(
        self, review_ids: Collection[ReviewId], caller_id: CallerId
    ) -> List[Vote]:
        """Find a caller's votes on several reviews (batch query).

        Args:
            review_ids: Reviews to check
            caller_id: The caller's durable identity

        Returns:
            Votes by the caller on the given reviews
        """
        pass
