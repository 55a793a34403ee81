"""Domain layer DI providers."""

from dishka import Scope, provide

from ratings.config import AnonymitySettings, AuthSettings
from ratings.domain.repository import VoteRepository
from ratings.domain.service import DisplayIdentityService, JWTService, VoteService
from ratings.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_display_identity_service(
        self, anonymity_settings: AnonymitySettings
    ) -> DisplayIdentityService:
        """Provide display identity domain service."""
        return DisplayIdentityService(anonymity_settings=anonymity_settings)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        display_identity_service: DisplayIdentityService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            display_identity_service=display_identity_service,
        )
