"""
Repository error types.

Lookups that match nothing and failures reported by the store are raised as
distinct exception classes so callers can tell them apart without parsing
messages.
"""

from typing import Any

from .utils import classify_database_error


class AlbumRepositoryError(Exception):
    """Base class for all album repository errors."""


class AlbumNotFoundError(AlbumRepositoryError):
    """Raised when a lookup by id matches no row."""

    def __init__(self, album_id: int, operation: str = "find_by_id"):
        self.album_id = album_id
        self.operation = operation
        super().__init__(f"{operation} {album_id}: no such album")


class StoreFailure(AlbumRepositoryError):
    """
    Raised when the store reports an error for a repository operation.

    Attributes:
        operation: Repository operation that failed (e.g. "insert")
        key: The artist name, album id or title the operation was called with
        cause: The underlying driver or price conversion exception
    """

    def __init__(self, operation: str, key: Any, cause: BaseException):
        self.operation = operation
        self.key = key
        self.cause = cause
        super().__init__(f"{operation} {key!r}: {cause}")

    @property
    def category(self) -> str:
        """Classification of the cause: permanent, systemic or transient."""
        return classify_database_error(self.cause)
