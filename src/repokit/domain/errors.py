"""Repository errors: generic operation failure and validation failure."""
from __future__ import annotations


class RepositoryError(Exception):
    """Repository operation failed. Keeps the underlying cause when there is one."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ValidationError(RepositoryError):
    """Entity or its id is missing (or not of the repository's entity type)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
