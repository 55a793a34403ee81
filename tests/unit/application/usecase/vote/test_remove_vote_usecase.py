"""Unit tests for RemoveVoteUseCase."""

import pytest

from ratings.application.usecase.vote.remove_vote import (
    RemoveVoteRequest,
    RemoveVoteUseCase,
)
from ratings.domain.error import AuthRequiredError, ValidationError
from ratings.domain.service import VoteService
from ratings.domain.value import VoteAction, VoteDirection
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRemoveVoteUseCase:
    """Tests for RemoveVoteUseCase."""

    @pytest.mark.asyncio
    async def test_remove_existing_vote(self, unit_env, caller_id, review_id):
        """Removing a held vote should delete it and answer deleted."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        await vote_service.cast_or_toggle(caller_id, review_id, VoteDirection.HELPFUL)
        use_case = RemoveVoteUseCase(vote_service=vote_service)

        # Act
        response = await use_case.execute(
            RemoveVoteRequest(review_id=str(review_id), caller_id=str(caller_id))
        )

        # Assert
        assert response.model_dump(mode="json") == {
            "success": True,
            "action": "deleted",
        }
        assert await vote_service.batch_get_votes(caller_id, [review_id]) == {}

    @pytest.mark.asyncio
    async def test_remove_without_vote(self, unit_env, caller_id, review_id):
        """Removing nothing should still succeed."""
        use_case = await unit_env.get(RemoveVoteUseCase)

        response = await use_case.execute(
            RemoveVoteRequest(review_id=str(review_id), caller_id=str(caller_id))
        )

        assert response.action == VoteAction.DELETED

    @pytest.mark.asyncio
    async def test_missing_review_id(self, unit_env, caller_id):
        """A missing review id should fail validation."""
        use_case = await unit_env.get(RemoveVoteUseCase)

        with pytest.raises(ValidationError, match="review_id is required"):
            await use_case.execute(RemoveVoteRequest(caller_id=str(caller_id)))

    @pytest.mark.asyncio
    async def test_anonymous_caller(self, unit_env, review_id):
        """No caller should raise AuthRequiredError."""
        use_case = await unit_env.get(RemoveVoteUseCase)

        with pytest.raises(AuthRequiredError):
            await use_case.execute(RemoveVoteRequest(review_id=str(review_id)))
