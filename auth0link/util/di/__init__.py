"""Dependency injection module."""

from typing import Type

from auth0link.util.di.application import ProdApplicationProvider
from auth0link.util.di.base import Component, ProviderBase
from auth0link.util.di.core import ProdConfigProvider
from auth0link.util.di.domain import ProdDomainProvider
from auth0link.util.di.infrastructure import (
    Auth0Provider,
    PersistenceProvider,
    ProdAuth0Provider,
    ProdPersistenceProvider,
)
from auth0link.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    Auth0Provider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    - No subclasses: concrete provider, used directly
    - Has subclasses: mockable component, selected by __is_mock__

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise DependencyInjectionError(
            f"No {kind} implementation for {component_name}"
        )

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "Auth0Provider",
    "PersistenceProvider",
    "ProdAuth0Provider",
    "ProdPersistenceProvider",
]
