"""Logfire setup and instrumentation.

Application code logs through logfire directly:

    logfire.info("Vote recorded", item_id=item_id, reaction=reaction.value)

    with logfire.span("reaction_service.cast_vote", item_id=item_id):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from reactions.config import Settings


def _should_send(settings: Settings) -> bool:
    """Explicit flag first, otherwise send whenever a token is configured."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    options: dict[str, Any] = {
        "service_name": "reactions-backend",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        options["token"] = settings.observability.logfire_token

    logfire.configure(**options)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request with method, path and client host.

    Headers are not captured: they carry voter cookies and the admin token.

    Args:
        app: FastAPI application instance
    """

    def _request_attributes(request, attributes):
        mapped = dict(attributes)
        mapped["method"] = getattr(request, "method", None)
        url = getattr(request, "url", None)
        if url is not None:
            mapped["path"] = url.path
        client = getattr(request, "client", None)
        if client:
            mapped["client_host"] = client.host
        return mapped

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
