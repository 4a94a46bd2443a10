"""
Abstract base class for link stores.

This module defines the interface that every link store must implement,
so the in-memory store can later be replaced without touching the API layer.
"""
from abc import ABC, abstractmethod


class LinkStore(ABC):
    """
    Abstract base class for link stores.

    A link store maps short codes to long URLs. Entries are immutable once
    created: there is no update and no delete.
    """

    @abstractmethod
    def create(self, long_url: str, requested_code: str | None = None) -> str:
        """
        Store a long URL under a requested or generated short code.

        Args:
            long_url: Non-empty URL to store, kept exactly as given
            requested_code: Caller-chosen code, or None to generate one

        Returns:
            The short code the URL is stored under

        Raises:
            InvalidInputError: If long_url or requested_code is invalid
            CodeAlreadyExistsError: If requested_code is already taken
            CodeSpaceExhaustedError: If no free code could be generated
        """
        pass

    @abstractmethod
    def resolve(self, short_code: str) -> str:
        """
        Look up the long URL for a short code.

        Args:
            short_code: Code returned by create()

        Returns:
            The stored long URL, unchanged

        Raises:
            LinkNotFoundError: If the code is not in the store
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        """Number of stored links."""
        pass

    @abstractmethod
    def __contains__(self, short_code: object) -> bool:
        pass
