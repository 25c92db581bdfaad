"""Machine-to-machine token clients."""

import httpx
import logfire
from pydantic import ValidationError

from auth0link.adapter.error import ApiError, ResponseDecodeError
from auth0link.config import ClientConfig
from auth0link.domain.model.remote import TokenSet
from auth0link.domain.service.token_cache import MachineTokenClient

TEST_TOKEN = "test_token"


class Auth0MachineTokenClient(MachineTokenClient):
    """Client-credentials grant against the tenant's /oauth/token endpoint."""

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize token client.

        Args:
            config: Auth0 client configuration (machine credentials, audience)
            transport: Optional httpx transport (used to stub the network)
        """
        self.config = config
        self.transport = transport

    async def fetch_token(self) -> str | None:
        """Request a machine token.

        Returns:
            The access token, or None when the endpoint is unreachable

        Raises:
            ApiError: If the endpoint answered with a non-2xx status
            ResponseDecodeError: If the response has no access_token
        """
        data = {
            "grant_type": "client_credentials",
            "client_id": self.config.machine_client_id,
            "client_secret": self.config.machine_client_secret,
            "audience": self.config.audience,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    self.config.token_url,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
        except httpx.HTTPError as e:
            # Callers treat a missing token as "proceed unauthenticated"
            logfire.error(
                "Machine token request could not be sent",
                url=self.config.token_url,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

        if not response.is_success:
            logfire.error(
                "Machine token request failed",
                status_code=response.status_code,
                response=response.text[:500],
            )
            raise ApiError.from_status(response.status_code)

        try:
            return TokenSet.model_validate_json(response.text).access_token
        except ValidationError as e:
            raise ResponseDecodeError(f"Unexpected token response: {e}") from e


class StaticMachineTokenClient(MachineTokenClient):
    """Returns a fixed token without any network I/O.

    Wired in when the application runs with ENVIRONMENT=test.
    """

    def __init__(self, token: str = TEST_TOKEN) -> None:
        self.token = token
        self.calls = 0

    async def fetch_token(self) -> str | None:
        self.calls += 1
        return self.token
