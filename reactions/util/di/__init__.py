"""Dependency injection module."""

from typing import Type

from reactions.util.di.application import ProdApplicationProvider
from reactions.util.di.base import Component, ProviderBase
from reactions.util.di.core import ProdConfigProvider
from reactions.util.di.domain import ProdDomainProvider
from reactions.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from reactions.util.error import DependencyInjectionError

# Concrete providers are used as-is; component bases are swapped for a
# production or mock subclass by get_provider
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for a PROVIDERS entry.

    A class without subclasses is concrete and returned unchanged. A class
    with subclasses is a mockable component; the subclass whose
    ``__is_mock__`` equals ``use_mock`` is returned.

    Raises:
        DependencyInjectionError: If the component has no matching subclass
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise DependencyInjectionError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
