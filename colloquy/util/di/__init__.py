"""Dependency injection module."""

from collections.abc import Collection

from colloquy.util.di.application import ProdApplicationProvider
from colloquy.util.di.base import Component, ProviderBase
from colloquy.util.di.core import ProdConfigProvider
from colloquy.util.di.domain import ProdDomainProvider
from colloquy.util.di.infrastructure import PersistenceProvider

PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]

MOCKABLE_COMPONENTS: frozenset[Component] = frozenset(
    base.__mock_component__ for base in PROVIDERS if base.__mock_component__
)


def build_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate one provider per entry in PROVIDERS.

    Args:
        mocked: Components to serve from their mock variant; every other
            component uses production

    Returns:
        Provider instances ready for ``make_async_container``

    Raises:
        ValueError: If an unknown component is named
    """
    unknown = set(mocked) - MOCKABLE_COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return [
        base.implementation(use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "MOCKABLE_COMPONENTS",
    "PROVIDERS",
    "ProviderBase",
    "build_providers",
]
