"""Domain services."""

from .base import Service
from .identity_client import IdentityClient
from .token_cache import (
    DEFAULT_TOKEN_NAME,
    TOKEN_TTL,
    MachineTokenClient,
    TokenCache,
)
from .token_verifier import TokenVerifier, VerificationResult
from .user_service import UserService

__all__ = [
    "DEFAULT_TOKEN_NAME",
    "IdentityClient",
    "MachineTokenClient",
    "Service",
    "TOKEN_TTL",
    "TokenCache",
    "TokenVerifier",
    "UserService",
    "VerificationResult",
]
