"""Dependency injection container."""

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from ratings.util.di import PROVIDERS, get_provider


def create_container(*overrides: Provider) -> AsyncContainer:
    """Build the production container.

    Settings are loaded from environment variables automatically.

    Args:
        *overrides: Extra providers registered after the production ones;
            whatever they provide replaces the production factory

    Returns:
        Configured DI container
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, *overrides, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the FastAPI app.

    Routes resolve ``FromDishka[...]`` parameters from a request-scoped
    child of this container.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
