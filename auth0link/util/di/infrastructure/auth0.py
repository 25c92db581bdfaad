"""Auth0 infrastructure providers."""

from dishka import Scope, provide
import logfire

from auth0link.adapter.auth0 import (
    ApiRequester,
    Auth0Client,
    Auth0MachineTokenClient,
    JWKSTokenVerifier,
    StaticMachineTokenClient,
)
from auth0link.config import ClientConfig, Settings
from auth0link.domain.service import (
    IdentityClient,
    MachineTokenClient,
    TokenCache,
    TokenVerifier,
)
from auth0link.util.di.base import ProviderBase
from auth0link.util.error import ConfigurationError


class Auth0Provider(ProviderBase):
    """Auth0 component base."""

    __mock_component__ = "auth0"


class ProdAuth0Provider(Auth0Provider):
    """Production Auth0 provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_machine_token_client(self, settings: Settings) -> MachineTokenClient:
        """Provide the machine token client.

        With ENVIRONMENT=test no token request leaves the process.

        Raises:
            ConfigurationError: If the tenant or machine credentials are missing
        """
        if settings.is_test:
            logfire.info("Test environment, using static machine token")
            return StaticMachineTokenClient()

        if not settings.auth0.domain or not settings.auth0.audience:
            raise ConfigurationError("AUTH0__DOMAIN and AUTH0__AUDIENCE must be set")
        if not settings.auth0.machine_client_id:
            raise ConfigurationError("Auth0 machine client ID must be configured")
        if not settings.auth0.machine_client_secret:
            raise ConfigurationError("Auth0 machine client secret must be configured")

        return Auth0MachineTokenClient(settings.client_config)

    @provide(scope=Scope.APP)
    def get_token_verifier(self, config: ClientConfig) -> TokenVerifier:
        return JWKSTokenVerifier(config)

    @provide(scope=Scope.REQUEST)
    async def get_requester(
        self, token_cache: TokenCache, config: ClientConfig
    ) -> ApiRequester:
        """Provide a requester bound to the current machine token."""
        return await ApiRequester.from_token_cache(token_cache, timeout=config.timeout)

    @provide(scope=Scope.REQUEST)
    def get_identity_client(
        self, requester: ApiRequester, config: ClientConfig
    ) -> IdentityClient:
        """Provide Auth0 Management and Authentication API client."""
        return Auth0Client(requester=requester, config=config)
