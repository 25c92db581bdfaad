"""In-memory repository implementations for testing."""

from .access_token import InMemoryAccessTokenRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAccessTokenRepository",
    "InMemoryUserRepository",
]
