"""Machine token cache domain service."""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import logfire

from auth0link.domain.model.access_token import AccessToken
from auth0link.domain.repository.access_token import AccessTokenRepository

from .base import Service

# Tokens are refreshed once they are this old, regardless of what the
# provider says about their lifetime.
TOKEN_TTL = timedelta(hours=24)

DEFAULT_TOKEN_NAME = "auth0"


class MachineTokenClient:
    """Obtains a machine-to-machine token from the identity provider."""

    async def fetch_token(self) -> str | None:
        """Run a client-credentials grant.

        Returns:
            The access token, or None if the provider could not be reached
        """
        raise NotImplementedError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenCache(Service):
    """Keeps one persisted machine token per name, refreshed after TOKEN_TTL.

    Two concurrent cache misses may both refresh; the last write wins.
    """

    def __init__(
        self,
        access_token_repository: AccessTokenRepository,
        token_client: MachineTokenClient,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize token cache.

        Args:
            access_token_repository: Storage for cached tokens
            token_client: Client performing the client-credentials grant
            clock: Source of "now", injectable for tests
        """
        self.access_token_repository = access_token_repository
        self.token_client = token_client
        self.clock = clock

    def is_fresh(self, token: AccessToken) -> bool:
        """Whether a cached token is younger than TOKEN_TTL."""
        return self.clock() - token.refreshed_at < TOKEN_TTL

    async def get_token(self, name: str = DEFAULT_TOKEN_NAME) -> str | None:
        """Return the cached token, refreshing it when missing or stale.

        Args:
            name: Token name

        Returns:
            Access token, or None if a refresh could not reach the provider
        """
        with logfire.span("token_cache.get_token", name=name):
            cached = await self.access_token_repository.find_by_name(name)
            if cached and self.is_fresh(cached):
                logfire.debug("Using cached machine token", name=name)
                return cached.token

            logfire.info(
                "Machine token missing or stale",
                name=name,
                refreshed_at=cached.refreshed_at.isoformat() if cached else None,
            )
            return await self.refresh(name)

    async def refresh(self, name: str = DEFAULT_TOKEN_NAME) -> str | None:
        """Fetch a new token and store it under name.

        Args:
            name: Token name

        Returns:
            The new token, or None if the provider could not be reached. In that
            case the cache is left untouched.
        """
        with logfire.span("token_cache.refresh", name=name):
            token = await self.token_client.fetch_token()
            if token is None:
                logfire.warn("Machine token refresh returned no token", name=name)
                return None

            saved = await self.access_token_repository.save(
                AccessToken(name=name, token=token, refreshed_at=self.clock())
            )
            logfire.info("Machine token refreshed", name=name)
            return saved.token
