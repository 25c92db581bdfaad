"""Auth0 adapter."""

from .client import Auth0Client
from .mock import MockAuth0Client
from .requester import ApiRequester
from .token import Auth0MachineTokenClient, StaticMachineTokenClient
from .verifier import JWKSTokenVerifier, StaticTokenVerifier

__all__ = [
    "ApiRequester",
    "Auth0Client",
    "Auth0MachineTokenClient",
    "JWKSTokenVerifier",
    "MockAuth0Client",
    "StaticMachineTokenClient",
    "StaticTokenVerifier",
]
