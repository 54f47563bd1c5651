"""Production container and FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from colloquy.util.di import build_providers


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings come from the environment. FastapiProvider makes the current
    Request available to request-scoped providers.
    """
    return make_async_container(*build_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app for FromDishka injection."""
    setup_dishka(container, app)
