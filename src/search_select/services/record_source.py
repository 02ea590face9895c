"""
Abstract base class defining the paginated record search contract.

A record source is implemented once per searchable entity type and is the
only place that knows the backend's URL and response shape, so the generic
control never branches on resource names.

Implementations:
- DemoRecordSource: Static in-memory records for development/testing
- HttpRecordSource: REST backend queried with httpx
"""

from abc import ABC, abstractmethod

from search_select.models.pagination import Page, RawRecord


class RecordSource(ABC):
    """
    Abstract base class for paginated record search.

    Subclasses must implement fetch_page(). Single-record lookup, used to
    label a selected value outside the loaded pages, is optional.
    """

    @abstractmethod
    async def fetch_page(self, term: str, page: int, limit: int) -> Page:
        """
        Return one page of records matching the term.

        Args:
            term: Free-text substring filter; empty means no filter.
            page: Page number (1-indexed).
            limit: Number of records per page.

        Raises:
            FetchError: If the backend cannot be reached or answers with
                an unusable body.
        """

    async def fetch_one(self, value: str) -> RawRecord | None:
        """
        Return the record with the given identifier, if the source can.

        Default implementation returns None.
        """
        return None

    async def aclose(self) -> None:
        """Release any network resources held by the source."""
