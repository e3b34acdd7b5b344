"""Production DI container and its FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from stackit.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with every production implementation.

    The notification broker lives in this container's APP scope, so the
    container must be shared by all requests and WebSocket sessions of the
    process.

    Returns:
        DI container, not yet attached to an app
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app.

    The container is also stored on app.state, where WebSocket routes pick it
    up to open their own request scopes.
    """
    setup_dishka(container, app)
