"""Logfire setup for the API and the maintenance scripts.

Services open their own spans, for example::

    with logfire.span("cascade.on_entity_deleted", entity_id=str(video_id)):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from vidtube.config import ObservabilitySettings, Settings

SERVICE_NAME = "vidtube-backend"


def _send_to_logfire(settings: ObservabilitySettings) -> bool:
    """An explicit flag wins; otherwise send only when a token is configured."""
    if settings.send_to_logfire is not None:
        return settings.send_to_logfire
    return settings.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Without a token everything stays on the console, which is what tests
    and local development want.
    """
    send = _send_to_logfire(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Tag engagement requests with the target kind they address."""
    kind = request.path_params.get("kind")
    if kind is None:
        return attributes
    return {**attributes, "target_kind": kind}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request except liveness probes."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls="/health",
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
