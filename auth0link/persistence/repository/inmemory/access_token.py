"""In-memory access token repository for testing."""

from typing import Optional

from auth0link.domain.model.access_token import AccessToken
from auth0link.domain.repository.access_token import AccessTokenRepository


class InMemoryAccessTokenRepository(AccessTokenRepository):
    """In-memory implementation of AccessTokenRepository for testing."""

    def __init__(self) -> None:
        self._tokens: dict[str, AccessToken] = {}
        self.saves = 0

    async def find_by_name(self, name: str) -> Optional[AccessToken]:
        return self._tokens.get(name)

    async def save(self, token: AccessToken) -> AccessToken:
        self.saves += 1
        self._tokens[token.name] = token
        return token

    def __len__(self) -> int:
        return len(self._tokens)
