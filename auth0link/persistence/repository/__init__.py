"""PostgreSQL repository implementations."""

from auth0link.persistence.repository.access_token import (
    PostgresAccessTokenRepository,
)
from auth0link.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresAccessTokenRepository",
    "PostgresUserRepository",
]
