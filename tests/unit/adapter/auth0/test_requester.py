"""Unit tests for ApiRequester."""

import json

import httpx
import pytest

from auth0link.adapter.auth0 import ApiRequester, StaticMachineTokenClient
from auth0link.adapter.error import API_ERROR_MESSAGES, ApiError, TransportError
from auth0link.domain.service import MachineTokenClient, TokenCache
from auth0link.persistence.repository.inmemory import InMemoryAccessTokenRepository

URL = "https://tenant.example.auth0.com/api/v2/users"


def respond_with(status_code: int, text: str = "{}") -> httpx.MockTransport:
    return httpx.MockTransport(lambda request: httpx.Response(status_code, text=text))


class TestHeaders:
    """Tests for request headers."""

    @pytest.mark.asyncio
    async def test_sends_bearer_and_json_headers(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="[]")

        requester = ApiRequester("machine-token", transport=httpx.MockTransport(handler))

        await requester.request("get", URL)

        request = seen[0]
        assert request.method == "GET"
        assert request.headers["Authorization"] == "Bearer machine-token"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Content-Type"] == "application/json"

    def test_omits_authorization_without_token(self):
        assert "Authorization" not in ApiRequester(None).headers()

    @pytest.mark.asyncio
    async def test_sends_json_body_and_params(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, text='{"ok": true}')

        requester = ApiRequester("t", transport=httpx.MockTransport(handler))

        body = await requester.request(
            "POST", URL, body={"email": "a@x.com"}, params={"q": "x"}
        )

        assert body == '{"ok": true}'
        assert json.loads(seen[0].content) == {"email": "a@x.com"}
        assert seen[0].url.params["q"] == "x"

    def test_with_token_keeps_transport_and_timeout(self):
        transport = respond_with(200)
        requester = ApiRequester("machine", timeout=5.0, transport=transport)

        sibling = requester.with_token("user")

        assert sibling.token == "user"
        assert sibling.timeout == 5.0
        assert sibling.transport is transport
        assert requester.token == "machine"


class TestErrorMapping:
    """Tests for status code to ApiError mapping."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code,message",
        [
            (400, "The data sent was invalid"),
            (401, "Request unauthorized"),
            (403, "The request was forbidden or requires verification"),
            (404, "The requested resource could not be found"),
            (405, "Request method not allowed"),
            (429, "Too many attempts"),
            (500, "Internal server error"),
            (501, "Unsupported response or grant type"),
            (503, "The server is temporarily unavailable"),
        ],
    )
    async def test_mapped_statuses(self, status_code, message):
        requester = ApiRequester("t", transport=respond_with(status_code))

        with pytest.raises(ApiError) as exc_info:
            await requester.request("GET", URL)

        assert exc_info.value.status_code == status_code
        assert exc_info.value.message == message
        assert exc_info.value.is_mapped

    @pytest.mark.asyncio
    async def test_unmapped_status_uses_default_message(self):
        """Statuses outside the table still raise, with a generic message."""
        requester = ApiRequester("t", transport=respond_with(418))

        with pytest.raises(ApiError) as exc_info:
            await requester.request("GET", URL)

        assert exc_info.value.status_code == 418
        assert exc_info.value.message == "Unexpected response status"
        assert not exc_info.value.is_mapped

    def test_table_covers_documented_statuses(self):
        assert set(API_ERROR_MESSAGES) == {400, 401, 403, 404, 405, 429, 500, 501, 503}

    @pytest.mark.asyncio
    async def test_connection_failure_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        requester = ApiRequester("t", transport=httpx.MockTransport(handler))

        with pytest.raises(TransportError):
            await requester.request("GET", URL)


class TestFromTokenCache:
    """Tests for building a requester from the token cache."""

    @pytest.mark.asyncio
    async def test_uses_cached_machine_token(self):
        cache = TokenCache(
            InMemoryAccessTokenRepository(), StaticMachineTokenClient("cached")
        )

        requester = await ApiRequester.from_token_cache(cache, timeout=3.0)

        assert requester.token == "cached"
        assert requester.timeout == 3.0

    @pytest.mark.asyncio
    async def test_missing_token_builds_unauthenticated_requester(self):
        class NoToken(MachineTokenClient):
            async def fetch_token(self):
                return None

        cache = TokenCache(InMemoryAccessTokenRepository(), NoToken())

        requester = await ApiRequester.from_token_cache(cache)

        assert requester.token is None
        assert "Authorization" not in requester.headers()
