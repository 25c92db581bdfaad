"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from auth0link.config import ClientConfig, SessionSettings, Settings
from auth0link.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_client_config(self, settings: Settings) -> ClientConfig:
        """Provide the immutable Auth0 client configuration."""
        return settings.client_config

    @provide(scope=Scope.APP)
    def provide_session_settings(self, settings: Settings) -> SessionSettings:
        return settings.session
