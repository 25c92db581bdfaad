"""Mock Auth0 providers for testing."""

from dishka import Scope, provide

from auth0link.adapter.auth0 import (
    MockAuth0Client,
    StaticMachineTokenClient,
    StaticTokenVerifier,
)
from auth0link.domain.service import IdentityClient, MachineTokenClient, TokenVerifier
from auth0link.util.di.infrastructure.auth0 import Auth0Provider

# Bearer tokens accepted by the mock verifier
VALID_BEARER = "valid-bearer"
VALID_SUB = "auth0|123"


class MockAuth0Provider(Auth0Provider):
    """Mock Auth0 provider backed by MockAuth0Client.

    APP scope so tests can seed remote users and read recorded calls from the
    same instance the use cases talk to.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_client(self) -> MockAuth0Client:
        return MockAuth0Client(connection="Username-Password-Authentication")

    @provide(scope=Scope.APP)
    def get_identity_client(self, client: MockAuth0Client) -> IdentityClient:
        return client

    @provide(scope=Scope.APP)
    def get_static_token_client(self) -> StaticMachineTokenClient:
        return StaticMachineTokenClient()

    @provide(scope=Scope.APP)
    def get_machine_token_client(
        self, client: StaticMachineTokenClient
    ) -> MachineTokenClient:
        return client

    @provide(scope=Scope.APP)
    def get_token_verifier(self) -> TokenVerifier:
        return StaticTokenVerifier({VALID_BEARER: {"sub": VALID_SUB}})
