"""Unit tests for GetVotesUseCase."""

from uuid import uuid4

import pytest

from ratings.application.usecase.vote.get_votes import (
    GetVotesRequest,
    GetVotesUseCase,
)
from ratings.domain.error import ValidationError
from ratings.domain.service import VoteService
from ratings.domain.value import ReviewId, VoteDirection
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetVotesUseCase:
    """Tests for GetVotesUseCase."""

    @pytest.mark.asyncio
    async def test_returns_caller_votes_keyed_by_id(self, unit_env, caller_id):
        """Voted reviews should appear keyed by their string id."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        use_case = await unit_env.get(GetVotesUseCase)
        voted = ReviewId(uuid4())
        unvoted = ReviewId(uuid4())
        await vote_service.cast_or_toggle(caller_id, voted, VoteDirection.UNHELPFUL)

        # Act
        response = await use_case.execute(
            GetVotesRequest(
                review_ids=f"{voted}, {unvoted}", caller_id=str(caller_id)
            )
        )

        # Assert
        assert response.success is True
        assert response.votes == {str(voted): VoteDirection.UNHELPFUL}

    @pytest.mark.asyncio
    async def test_anonymous_gets_empty_votes(self, unit_env, review_id):
        """Anonymous viewers should get an empty mapping."""
        use_case = await unit_env.get(GetVotesUseCase)

        response = await use_case.execute(GetVotesRequest(review_ids=str(review_id)))

        assert response.model_dump(mode="json") == {"success": True, "votes": {}}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("review_ids", [None, "", " , ,"])
    async def test_missing_review_ids(self, unit_env, caller_id, review_ids):
        """Missing or empty review_ids should fail validation."""
        use_case = await unit_env.get(GetVotesUseCase)

        with pytest.raises(ValidationError, match="review_ids parameter is required"):
            await use_case.execute(
                GetVotesRequest(review_ids=review_ids, caller_id=str(caller_id))
            )

    @pytest.mark.asyncio
    async def test_malformed_review_id(self, unit_env, caller_id):
        """A malformed id in the list should fail validation."""
        use_case = await unit_env.get(GetVotesUseCase)

        with pytest.raises(ValidationError, match="Invalid review_id"):
            await use_case.execute(
                GetVotesRequest(review_ids="abc", caller_id=str(caller_id))
            )

    @pytest.mark.asyncio
    async def test_anonymous_malformed_ids_get_empty_votes(self, unit_env):
        """Anonymous viewers should get an empty mapping even for odd ids."""
        use_case = await unit_env.get(GetVotesUseCase)

        response = await use_case.execute(GetVotesRequest(review_ids="abc,def"))

        assert response.votes == {}

    @pytest.mark.asyncio
    async def test_anonymous_still_needs_review_ids(self, unit_env):
        """Anonymous viewers without review_ids should fail validation."""
        use_case = await unit_env.get(GetVotesUseCase)

        with pytest.raises(ValidationError, match="review_ids parameter is required"):
            await use_case.execute(GetVotesRequest(review_ids=" , "))
