"""FastAPI application factory.

Served by uvicorn in factory mode (``colloquy.interface.api.app:create_app``)
so every process builds its own container.
"""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from colloquy.config import APISettings, Settings
from colloquy.interface.api.dependencies import request_validation_error
from colloquy.interface.api.routes import comments, health, threads
from colloquy.util.di.container import create_container, setup_di
from colloquy.util.observability import instrument_fastapi

# Browsers embedding the comment widget send credentials as a cookie or
# a bearer header; both need these headers allowed.
CORS_HEADERS = ["Authorization", "Content-Type", "Accept", "Origin", "User-Agent"]
CORS_METHODS = ["GET", "POST", "PATCH", "DELETE", "OPTIONS"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close the DI container (and with it the engine) on shutdown."""
    yield
    await app.state.dishka_container.close()


def add_cors(app: FastAPI, api: APISettings) -> None:
    """Allow the configured frontends to call the API with credentials."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=api.cors_origins,
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        max_age=600,
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API.

    Logfire is expected to be configured already (start_app.py does it).

    Args:
        container: DI container to serve from (production one when omitted)
    """
    settings = Settings()

    app = FastAPI(
        title="Colloquy API",
        description="Threaded comments with moderation for published posts",
        version="0.1.0",
        lifespan=lifespan,
    )
    instrument_fastapi(app)
    add_cors(app, settings.api)
    app.add_exception_handler(RequestValidationError, request_validation_error)
    setup_di(app, container or create_container())

    for module in (health, threads, comments):
        app.include_router(module.router)

    return app
