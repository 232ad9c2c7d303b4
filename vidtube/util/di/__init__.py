"""Dependency injection module.

Providers are grouped by layer. Infrastructure components that tests swap
for in-memory versions subclass a component base (``PersistenceProvider``)
and flag themselves with ``__is_mock__``.
"""

from typing import Type

from vidtube.util.di.application import ProdApplicationProvider
from vidtube.util.di.base import Component, ProviderBase
from vidtube.util.di.core import ProdConfigProvider
from vidtube.util.di.domain import ProdDomainProvider
from vidtube.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from vidtube.util.error import DependencyInjectionError

# Container assembly order: config, domain, application, infrastructure
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def is_mockable(base: Type[ProviderBase]) -> bool:
    """Whether ``base`` is a component base with swappable implementations."""
    return base.__mock_component__ is not None


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    Concrete providers are returned as-is. For a component base, the
    subclass whose ``__is_mock__`` matches ``use_mock`` is returned; mock
    subclasses only exist once the test package has been imported.

    Raises:
        DependencyInjectionError: If no matching implementation is registered
    """
    if not is_mockable(base):
        return base

    impl = next(
        (c for c in base.__subclasses__() if c.__is_mock__ == use_mock),
        None,
    )
    if impl is None:
        kind = "mock" if use_mock else "production"
        raise DependencyInjectionError(
            str(base.__mock_component__), f"no {kind} implementation registered"
        )

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "is_mockable",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
