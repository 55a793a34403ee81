"""Unit tests for InMemoryVoteRepository."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from ratings.domain.error import ConflictError, StoreError
from ratings.domain.model.vote import Vote
from ratings.domain.value import (
    CallerId,
    DisplayId,
    ReviewId,
    VoteDirection,
    VoteId,
)
from ratings.persistence.repository.inmemory import InMemoryVoteRepository


def make_vote(
    review_id: ReviewId,
    caller_id: CallerId,
    direction: VoteDirection = VoteDirection.HELPFUL,
) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        review_id=review_id,
        caller_id=caller_id,
        display_id=DisplayId("anon-test"),
        direction=direction,
    )


class TestInMemoryVoteRepository:
    """Tests for the in-memory vote store."""

    @pytest.mark.asyncio
    async def test_insert_and_find_one(self, caller_id, review_id):
        """An inserted vote should be found by (review, caller)."""
        repo = InMemoryVoteRepository()
        vote = make_vote(review_id, caller_id)

        await repo.insert(vote)

        assert await repo.find_one(review_id, caller_id) == vote
        assert await repo.find_one(review_id, CallerId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_duplicate_insert_conflicts(self, caller_id, review_id):
        """A second vote for the same (review, caller) should conflict."""
        repo = InMemoryVoteRepository()
        await repo.insert(make_vote(review_id, caller_id))

        with pytest.raises(ConflictError):
            await repo.insert(make_vote(review_id, caller_id, VoteDirection.UNHELPFUL))

        assert len(repo.all()) == 1

    @pytest.mark.asyncio
    async def test_update_direction(self, caller_id, review_id):
        """Update should switch direction, timestamp and display id in place."""
        # Arrange
        repo = InMemoryVoteRepository()
        vote = await repo.insert(make_vote(review_id, caller_id))
        later = datetime.now(timezone.utc) + timedelta(minutes=5)

        # Act
        updated = await repo.update_direction(
            vote.id, VoteDirection.UNHELPFUL, later, DisplayId("anon-next")
        )

        # Assert
        assert updated.id == vote.id
        assert updated.direction == VoteDirection.UNHELPFUL
        assert updated.created_at == later
        assert updated.display_id == DisplayId("anon-next")
        assert await repo.find_one(review_id, caller_id) == updated

    @pytest.mark.asyncio
    async def test_update_missing_vote_fails(self):
        """Updating an unknown vote should be a store error."""
        repo = InMemoryVoteRepository()

        with pytest.raises(StoreError):
            await repo.update_direction(
                VoteId(uuid4()),
                VoteDirection.HELPFUL,
                datetime.now(timezone.utc),
                DisplayId("x"),
            )

    @pytest.mark.asyncio
    async def test_delete(self, caller_id, review_id):
        """Deleted votes should be gone; deleting twice is harmless."""
        repo = InMemoryVoteRepository()
        vote = await repo.insert(make_vote(review_id, caller_id))

        await repo.delete(vote.id)
        await repo.delete(vote.id)

        assert await repo.find_one(review_id, caller_id) is None

    @pytest.mark.asyncio
    async def test_find_many(self, caller_id):
        """Batch lookup should return only the caller's votes on given reviews."""
        repo = InMemoryVoteRepository()
        r1, r2, r3 = (ReviewId(uuid4()) for _ in range(3))
        await repo.insert(make_vote(r1, caller_id))
        await repo.insert(make_vote(r2, caller_id, VoteDirection.UNHELPFUL))
        await repo.insert(make_vote(r3, caller_id))
        await repo.insert(make_vote(r1, CallerId(uuid4())))

        votes = await repo.find_many([r1, r2], caller_id)

        assert {(v.review_id, v.direction) for v in votes} == {
            (r1, VoteDirection.HELPFUL),
            (r2, VoteDirection.UNHELPFUL),
        }
        assert await repo.find_many([], caller_id) == []
