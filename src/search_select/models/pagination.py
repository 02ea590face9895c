"""
Pagination models for server-backed option search.

The backend answers every list request with a page of raw records and a
``pagination`` block:

    {
      "data": {
        "<resourceKey>": [ RawRecord, ... ],
        "pagination": {"total", "page", "limit", "totalPages",
                       "hasNextPage", "hasPreviousPage"}
      }
    }

``PageInfo`` mirrors the pagination block, ``Page`` pairs it with the
records and ``PaginationCursor`` tracks where a search field currently is.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from search_select.lib import logs

LOG = logs.logger(__file__)

RawRecord = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class SearchQuery:
    """A single search request: free-text term plus 1-based page."""

    term: str = ""
    page: int = 1
    page_size: int = 30

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")

    def next(self) -> "SearchQuery":
        """Return the query for the following page of the same term."""
        return SearchQuery(self.term, self.page + 1, self.page_size)

    def with_term(self, term: str) -> "SearchQuery":
        """Return a page-1 query for a new term."""
        return SearchQuery(term, 1, self.page_size)

    def to_params(self) -> dict[str, Any]:
        """Return the query string parameters for the list endpoint."""
        params: dict[str, Any] = {"page": self.page, "limit": self.page_size}
        if self.term.strip():
            params["search"] = self.term.strip()
        return params


@dataclass(frozen=True, slots=True)
class PageInfo:
    """The pagination block of a list response."""

    total: int = 0
    page: int = 1
    limit: int = 30
    total_pages: int = 0
    has_next_page: bool = False
    has_previous_page: bool = False

    @property
    def has_more(self) -> bool:
        """Return True when pages after this one exist."""
        return self.page < self.total_pages

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "PageInfo":
        """Deserialize the camelCase pagination block."""
        if not data:
            return cls()
        info = cls(
            total=int(data.get("total") or 0),
            page=int(data.get("page") or 1),
            limit=int(data.get("limit") or 0),
            total_pages=int(data.get("totalPages") or 0),
            has_next_page=bool(data.get("hasNextPage", False)),
            has_previous_page=bool(data.get("hasPreviousPage", False)),
        )
        if "hasNextPage" in data and info.has_next_page != info.has_more:
            LOG.warning(
                "Pagination disagrees - hasNextPage:%s page:%s totalPages:%s",
                info.has_next_page,
                info.page,
                info.total_pages,
            )
        return info

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the camelCase wire shape."""
        return {
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "totalPages": self.total_pages,
            "hasNextPage": self.has_next_page,
            "hasPreviousPage": self.has_previous_page,
        }


@dataclass(frozen=True, slots=True)
class Page:
    """One immutable page of raw records."""

    items: tuple[RawRecord, ...] = ()
    pagination: PageInfo = field(default_factory=PageInfo)

    @property
    def has_more(self) -> bool:
        return self.pagination.has_more

    @classmethod
    def of(
        cls,
        items: list[RawRecord],
        page: int,
        limit: int,
        total: int,
    ) -> "Page":
        """Build a page from a slice and the total number of matches."""
        total_pages = -(-total // limit) if limit else 0
        return cls(
            items=tuple(items),
            pagination=PageInfo(
                total=total,
                page=page,
                limit=limit,
                total_pages=total_pages,
                has_next_page=page < total_pages,
                has_previous_page=page > 1,
            ),
        )


@dataclass
class PaginationCursor:
    """
    Tracks pagination state for one search field.

    Attributes:
        page: Last page applied to the option collection (0 before any).
        limit: Number of items per page.
        total: Total number of matches for the current term.
        total_pages: Total number of pages for the current term.
        has_more: Whether a scroll to the bottom should fetch another page.
    """

    page: int = 0
    limit: int = 30
    total: int = 0
    total_pages: int = 0
    has_more: bool = False

    def reset(self) -> None:
        """Forget the previous term's position."""
        self.page = 0
        self.total = 0
        self.total_pages = 0
        self.has_more = False

    def advance(self, info: PageInfo, page: int | None = None) -> None:
        """
        Move to the page described by a response.

        Args:
            info: Pagination block of the response.
            page: The page that was requested. Takes precedence over the
                page echoed by the server.
        """
        self.page = page or info.page
        self.total = info.total
        self.total_pages = info.total_pages
        self.has_more = self.page < info.total_pages

    def next_page(self) -> int:
        """Return the next page number."""
        return self.page + 1
