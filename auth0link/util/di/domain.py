"""Domain layer DI providers."""

from dishka import Scope, provide

from auth0link.domain.repository import AccessTokenRepository, UserRepository
from auth0link.domain.service import MachineTokenClient, TokenCache, UserService
from auth0link.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_token_cache(
        self,
        access_token_repository: AccessTokenRepository,
        token_client: MachineTokenClient,
    ) -> TokenCache:
        """Provide machine token cache."""
        return TokenCache(
            access_token_repository=access_token_repository,
            token_client=token_client,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
