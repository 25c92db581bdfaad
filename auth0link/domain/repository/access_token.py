"""Access token repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from auth0link.domain.model.access_token import AccessToken


class AccessTokenRepository(ABC):
    """Repository for cached machine tokens, keyed by name."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[AccessToken]:
        """Find the cached token stored under a name.

        Args:
            name: Token name, e.g. "auth0"

        Returns:
            The token if cached, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, token: AccessToken) -> AccessToken:
        """Insert the token, or update the row that already has its name.

        Args:
            token: Token to store

        Returns:
            The stored token
        """
        pass
