"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from vidtube.util.di import PROVIDERS, Component, get_provider, is_mockable
from vidtube.util.error import DependencyInjectionError

# Importing the mocks registers them as component implementations
from .persistence import MockPersistenceProvider  # noqa: F401


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Every mockable component uses its in-memory implementation unless named
    in ``unmock``. Unmocked persistence needs a migrated PostgreSQL at
    DATABASE__URL.

    Args:
        unmock: Components to use production implementations for

    Returns:
        Configured test container

    Raises:
        DependencyInjectionError: If ``unmock`` names an unknown component

    Examples:
        # Unit tests - in-memory stores
        container = build_test_container()

        # Integration tests - real persistence
        container = build_test_container(unmock={"persistence"})

        # API tests - in-memory stores behind the FastAPI app
        setup_di(create_app(), build_test_container())
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = [
        get_provider(
            base,
            use_mock=is_mockable(base) and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]

    # FastapiProvider lets the same container back a TestClient
    return make_async_container(*provider_instances, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject component names no provider declares."""
    known = {base.__mock_component__ for base in PROVIDERS if is_mockable(base)}
    for component in unmock - known:
        raise DependencyInjectionError(component, "unknown component")
