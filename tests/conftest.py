"""Test configuration and fixtures."""

import logfire
import pytest

from ratings.domain.value import CallerId, ReviewId
from tests.harness import make_caller_id, make_review_id

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def caller_id() -> CallerId:
    """A caller identity."""
    return make_caller_id()


@pytest.fixture
def review_id() -> ReviewId:
    """A review identity."""
    return make_review_id()
