"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vidtube.config import Settings
from vidtube.interface.api.errors import register_error_handlers
from vidtube.interface.api.routes import (
    channels,
    comments,
    health,
    posts,
    reactions,
    subscriptions,
    users,
    videos,
)
from vidtube.util.di.container import (
    container_lifespan,
    create_container,
    setup_di,
)
from vidtube.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py if needed.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="VidTube API",
        description="Engagement backend for VidTube: likes, subscriptions and aggregated feeds",
        version="0.1.0",
        lifespan=container_lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(reactions.router)
    app_instance.include_router(subscriptions.router)
    app_instance.include_router(videos.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(users.router)
    app_instance.include_router(channels.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
