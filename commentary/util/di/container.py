"""Dependency injection container."""

from collections.abc import Iterable

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from commentary.util.di import COMPONENTS, PROVIDERS, Component, get_provider


def create_container(mocked: Iterable[Component] = ()) -> AsyncContainer:
    """Build the DI container.

    Production code passes nothing and gets every real implementation.
    Mock providers must be imported before they can be selected.

    Args:
        mocked: Components to replace with their mock implementation

    Returns:
        Async container with FastAPI integration

    Raises:
        ValueError: If a component is unknown or has no mock
    """
    mocked = set(mocked)
    unknown = mocked - COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach `container` to `app`, replacing any container set earlier."""
    setup_dishka(container, app)
