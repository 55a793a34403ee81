"""Application layer DI providers."""

from dishka import Scope, provide

from ratings.application.usecase.vote import (
    CastVoteUseCase,
    GetVotesUseCase,
    RemoveVoteUseCase,
)
from ratings.domain.service import VoteService
from ratings.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(self, vote_service: VoteService) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_get_votes_use_case(self, vote_service: VoteService) -> GetVotesUseCase:
        """Provide get votes use case."""
        return GetVotesUseCase(vote_service=vote_service)
