"""Mock persistence providers for testing."""

from dishka import Scope, provide

from ratings.domain.repository import VoteRepository
from ratings.persistence.repository.inmemory import InMemoryVoteRepository
from ratings.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so every request against one container sees the same
    store. Each test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()
