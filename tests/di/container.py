"""Test container: mock components unless asked otherwise."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from colloquy.util.di import MOCKABLE_COMPONENTS, Component, build_providers


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container with every mockable component mocked.

    Args:
        unmock: Components to run against their production implementation

    Raises:
        ValueError: If an unknown component is named

    Examples:
        # Unit and e2e tests, in-memory persistence
        container = build_test_container()

        # Against a running PostgreSQL
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    unknown = unmock - MOCKABLE_COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = build_providers(mocked=MOCKABLE_COMPONENTS - unmock)
    return make_async_container(*providers, FastapiProvider())
