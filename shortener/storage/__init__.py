"""
Link storage layer.

This package holds the mapping from short codes to long URLs behind a
LinkStore interface, with an in-memory implementation.
"""

from shortener.storage.base import LinkStore
from shortener.storage.memory import InMemoryLinkStore
from shortener.storage.exceptions import (
    CodeAlreadyExistsError,
    CodeSpaceExhaustedError,
    InvalidInputError,
    LinkNotFoundError,
    LinkStoreError,
)

__all__ = [
    "LinkStore",
    "InMemoryLinkStore",
    "LinkStoreError",
    "InvalidInputError",
    "CodeAlreadyExistsError",
    "CodeSpaceExhaustedError",
    "LinkNotFoundError",
]
