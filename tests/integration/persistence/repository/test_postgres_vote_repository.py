"""Integration tests for PostgresVoteRepository.

Needs a migrated database at DATABASE__URL; set RATINGS_INTEGRATION=1 to run.
"""

import os
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from ratings.domain.error import ConflictError
from ratings.domain.model import Vote
from ratings.domain.repository import VoteRepository
from ratings.domain.service import VoteService
from ratings.domain.value import (
    CallerId,
    DisplayId,
    ReviewId,
    VoteAction,
    VoteDirection,
    VoteId,
)
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.getenv("RATINGS_INTEGRATION"),
    reason="set RATINGS_INTEGRATION=1 with a migrated postgres to run",
)

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


def make_vote(review_id: ReviewId, caller_id: CallerId) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        review_id=review_id,
        caller_id=caller_id,
        display_id=DisplayId("anon-integration"),
        direction=VoteDirection.HELPFUL,
        created_at=datetime.now(timezone.utc),
    )


class TestPostgresVoteRepository:
    """Tests against a real votes table."""

    @pytest.mark.asyncio
    async def test_insert_find_update_delete(self, integration_env):
        """A vote should round the full lifecycle through the table."""
        # Arrange
        repo = await integration_env.get(VoteRepository)
        review_id, caller_id = ReviewId(uuid4()), CallerId(uuid4())
        vote = await repo.insert(make_vote(review_id, caller_id))

        # Act
        updated = await repo.update_direction(
            vote.id,
            VoteDirection.UNHELPFUL,
            datetime.now(timezone.utc),
            DisplayId("anon-next"),
        )

        # Assert
        assert updated.direction == VoteDirection.UNHELPFUL
        found = await repo.find_one(review_id, caller_id)
        assert found is not None and found.id == vote.id
        assert [v.id for v in await repo.find_many([review_id], caller_id)] == [vote.id]

        await repo.delete(vote.id)
        assert await repo.find_one(review_id, caller_id) is None

    @pytest.mark.asyncio
    async def test_unique_constraint_raises_conflict(self, integration_env):
        """A second row for one (review, caller) should raise ConflictError."""
        repo = await integration_env.get(VoteRepository)
        review_id, caller_id = ReviewId(uuid4()), CallerId(uuid4())
        await repo.insert(make_vote(review_id, caller_id))

        with pytest.raises(ConflictError):
            await repo.insert(make_vote(review_id, caller_id))

        # The savepoint keeps the transaction usable
        assert await repo.find_one(review_id, caller_id) is not None

    @pytest.mark.asyncio
    async def test_service_walks_states(self, integration_env):
        """The service should create, switch and toggle off on postgres."""
        service = await integration_env.get(VoteService)
        review_id, caller_id = ReviewId(uuid4()), CallerId(uuid4())

        actions = [
            (await service.cast_or_toggle(caller_id, review_id, d)).action
            for d in (
                VoteDirection.HELPFUL,
                VoteDirection.UNHELPFUL,
                VoteDirection.UNHELPFUL,
            )
        ]

        assert actions == [VoteAction.CREATED, VoteAction.UPDATED, VoteAction.REMOVED]
