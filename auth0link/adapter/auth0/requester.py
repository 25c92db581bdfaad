"""Authenticated JSON requester for the Auth0 APIs."""

from typing import Any

import httpx
import logfire

from auth0link.adapter.error import ApiError, TransportError
from auth0link.domain.service.token_cache import DEFAULT_TOKEN_NAME, TokenCache

DEFAULT_TIMEOUT = 30.0


class ApiRequester:
    """Sends one JSON request per call with a bearer token.

    The token is fixed for the lifetime of the instance. Build a new requester
    to pick up a refreshed token. There is no retry: a failed call raises.
    """

    def __init__(
        self,
        token: str | None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize requester.

        Args:
            token: Bearer token; None sends requests without Authorization
            timeout: Connect/total timeout in seconds
            transport: Optional httpx transport (used to stub the network)
        """
        self.token = token
        self.timeout = timeout
        self.transport = transport

    @classmethod
    async def from_token_cache(
        cls,
        token_cache: TokenCache,
        name: str = DEFAULT_TOKEN_NAME,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ApiRequester":
        """Build a requester using the cached machine token.

        Args:
            token_cache: Machine token cache
            name: Token name
            timeout: Connect/total timeout in seconds
            transport: Optional httpx transport

        Returns:
            Requester bound to the current machine token
        """
        token = await token_cache.get_token(name)
        if token is None:
            logfire.warn("No machine token available, requests are unauthenticated")
        return cls(token, timeout=timeout, transport=transport)

    def with_token(self, token: str) -> "ApiRequester":
        """Sibling requester that authenticates with another token."""
        return ApiRequester(token, timeout=self.timeout, transport=self.transport)

    def headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def request(
        self,
        method: str,
        url: str,
        body: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> str:
        """Send a request and return the raw response body.

        Args:
            method: HTTP method
            url: Absolute URL
            body: JSON body, if any
            params: Query string parameters, if any

        Returns:
            Response body text

        Raises:
            TransportError: If the provider could not be reached
            ApiError: If the provider answered with a non-2xx status
        """
        method = method.upper()
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.request(
                    method,
                    url,
                    json=body,
                    params=params,
                    headers=self.headers(),
                )
        except httpx.HTTPError as e:
            logfire.error(
                "Auth0 request could not be sent",
                method=method,
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not response.is_success:
            error = ApiError.from_status(response.status_code)
            logfire.error(
                "Auth0 request failed",
                method=method,
                url=url,
                status_code=response.status_code,
                mapped=error.is_mapped,
                response=response.text[:500],
            )
            raise error

        return response.text
