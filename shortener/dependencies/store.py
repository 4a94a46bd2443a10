"""
Link store dependency injection for FastAPI.

The store is created once per application in the lifespan handler and kept
on app.state; every request handler receives that same instance.
"""
from fastapi import Request

from shortener.config import settings
from shortener.storage.base import LinkStore
from shortener.storage.memory import InMemoryLinkStore


def build_store() -> LinkStore:
    """Construct the process-wide link store from configuration."""
    return InMemoryLinkStore(
        code_length=settings.SHORT_CODE_LENGTH,
        max_attempts=settings.SHORT_CODE_MAX_ATTEMPTS,
        max_custom_code_length=settings.MAX_CUSTOM_CODE_LENGTH,
    )


def get_store(request: Request) -> LinkStore:
    """
    Return the link store attached to the running application.

    Returns:
        The LinkStore created at startup
    """
    return request.app.state.store
