"""
Link store exceptions.

Every failure of a store operation is raised as a subclass of LinkStoreError
so the HTTP layer can translate it into a response in one place.
"""


class LinkStoreError(Exception):
    """Base exception for link store operations."""

    pass


class InvalidInputError(LinkStoreError):
    """Raised when a long URL or requested short code fails validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


class CodeAlreadyExistsError(LinkStoreError):
    """Raised when a requested short code is already mapped."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Short code already exists: {code}")


class CodeSpaceExhaustedError(LinkStoreError):
    """Raised when no free generated code was found within the retry budget."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"Could not generate a free short code after {attempts} attempts"
        )


class LinkNotFoundError(LinkStoreError):
    """Raised when a short code is not present in the store."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Short link not found: {code}")
