"""
Exception types raised by the search-select package.

Fetch failures are raised by record sources and caught at the fetch
coordinator boundary; they never reach form submit validation.
"""


class SearchSelectError(Exception):
    """Base class for all search-select errors."""


class FetchError(SearchSelectError):
    """
    A paginated fetch or single-record lookup failed.

    Covers transport failures, timeouts, non-2xx responses and bodies that
    do not have the expected ``data``/``pagination`` shape.

    Attributes:
        status_code: HTTP status code when the server answered, else None.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnknownEntityError(SearchSelectError, ValueError):
    """Raised when an entity or source kind is not registered."""
