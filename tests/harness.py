"""Test harness for unit, integration and E2E tests.

Settings are loaded from environment variables (configure via .env or export).
"""

from uuid import uuid4

import pytest_asyncio

from ratings.config import Settings
from ratings.domain.service import JWTService
from ratings.domain.value import CallerId, ReviewId
from ratings.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    unmocking and yields a request-scoped container for service access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_cast_vote(unit_env):
            service = await unit_env.get(VoteService)
            result = await service.cast_or_toggle(...)
            assert result.action == VoteAction.CREATED
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def make_review_id() -> ReviewId:
    """Fresh review id."""
    return ReviewId(uuid4())


def make_caller_id() -> CallerId:
    """Fresh caller id."""
    return CallerId(uuid4())


def make_auth_token(caller_id: CallerId) -> str:
    """Issue an auth token the environment settings accept."""
    return JWTService(Settings().auth).create_token(str(caller_id))
