"""Infrastructure providers."""

# Import bases
from .auth0 import Auth0Provider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .auth0 import ProdAuth0Provider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "Auth0Provider",
    "PersistenceProvider",
    "ProdAuth0Provider",
    "ProdPersistenceProvider",
]
