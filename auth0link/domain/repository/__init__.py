"""Repository interfaces.

Interfaces live in the domain layer; implementations live in persistence.
"""

from auth0link.domain.repository.access_token import AccessTokenRepository
from auth0link.domain.repository.user import UserRepository

__all__ = [
    "AccessTokenRepository",
    "UserRepository",
]
