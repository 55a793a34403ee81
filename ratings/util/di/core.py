"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from ratings.config import AnonymitySettings, AuthSettings, Settings
from ratings.util.di.base import ProviderBase
from ratings.util.error import ConfigurationError

_PLACEHOLDER = "CHANGE_ME_IN_PRODUCTION"


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings.

        Raises:
            ConfigurationError: If production runs with the placeholder secret
        """
        if settings.environment == "production" and settings.auth.jwt_secret == _PLACEHOLDER:
            raise ConfigurationError("AUTH__JWT_SECRET", "must be set in production")
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_anonymity_settings(self, settings: Settings) -> AnonymitySettings:
        """Provide anonymity settings.

        Raises:
            ConfigurationError: If production runs with the placeholder secret
        """
        if settings.environment == "production" and settings.anonymity.secret == _PLACEHOLDER:
            raise ConfigurationError("ANONYMITY__SECRET", "must be set in production")
        return settings.anonymity
