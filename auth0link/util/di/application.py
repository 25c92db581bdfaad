"""Application layer DI providers."""

from dishka import Scope, provide

from auth0link.application.usecase.auth import (
    CompleteLoginUseCase,
    LoginUseCase,
    LogoutUseCase,
)
from auth0link.application.usecase.user import (
    GetCurrentUserUseCase,
    UpsertUserUseCase,
)
from auth0link.config import ClientConfig
from auth0link.domain.service import IdentityClient, UserService
from auth0link.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_upsert_user_use_case(
        self, user_service: UserService, identity_client: IdentityClient
    ) -> UpsertUserUseCase:
        """Provide upsert user use case."""
        return UpsertUserUseCase(
            user_service=user_service, identity_client=identity_client
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    # Auth use cases
    @provide(scope=Scope.APP)
    def get_login_use_case(self, config: ClientConfig) -> LoginUseCase:
        return LoginUseCase(config=config)

    @provide(scope=Scope.APP)
    def get_logout_use_case(self, config: ClientConfig) -> LogoutUseCase:
        return LogoutUseCase(config=config)

    @provide(scope=Scope.REQUEST)
    def get_complete_login_use_case(
        self,
        identity_client: IdentityClient,
        upsert_user: UpsertUserUseCase,
        config: ClientConfig,
    ) -> CompleteLoginUseCase:
        """Provide authorization code callback use case."""
        return CompleteLoginUseCase(
            identity_client=identity_client, upsert_user=upsert_user, config=config
        )
