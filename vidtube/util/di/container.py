"""Dependency injection container."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from vidtube.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container: PostgreSQL stores, real services.

    Settings are read from the environment when first requested, and the
    database engine is only created when a request needs a session.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app``; routes resolve through DishkaRoute."""
    setup_dishka(container, app)


@asynccontextmanager
async def container_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close whichever container is attached to ``app`` on shutdown.

    Closing the container disposes the engine and its connection pool.
    """
    yield
    logfire.info("Closing DI container")
    await app.state.dishka_container.close()
