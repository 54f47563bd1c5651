"""Logfire setup.

Domain services open one span per operation and emit structured events
inside it::

    with logfire.span("comment_service.create_comment", post_id=str(post_id)):
        ...
        logfire.info("Comment created", comment_id=str(comment.id))

Denied operations and missing resources are ``warn``; store failures are
``error``.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from colloquy.config import Settings

SERVICE_NAME = "colloquy"

# Anonymous commenters' contact details and audit fields never leave the
# process unredacted.
SCRUBBED_ATTRIBUTES = ["email", "ip_address", "user_agent"]


def should_send(settings: Settings) -> bool:
    """Whether telemetry goes to Logfire cloud.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise telemetry
    is sent only when a token is configured.
    """
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return settings.observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Args:
        settings: Application settings
    """
    send = should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_ATTRIBUTES),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except the health probes.

    Headers are not captured; they carry the caller's token.

    Args:
        app: FastAPI application instance
    """

    def request_attributes(request, attributes):
        client = getattr(request, "client", None)
        return {
            **attributes,
            "route_path": request.url.path,
            "client_host": client.host if client else None,
        }

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls="/health",
        request_attributes_mapper=request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement issued by the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented", url=engine.url.render_as_string())
