"""
Data models for the search-select package.

This package provides:
- Pagination models (SearchQuery, PageInfo, Page, PaginationCursor)
- Option models (Option, OptionCollection)
- The explicit current-user context (UserContext)
- The bill record built on form submit (build_bill)

All models use Python dataclasses for type safety and IDE support.
"""

from search_select.models.bill import BILL_TYPES, build_bill
from search_select.models.context import UserContext
from search_select.models.option import Option, OptionCollection
from search_select.models.pagination import (
    Page,
    PageInfo,
    PaginationCursor,
    RawRecord,
    SearchQuery,
)

__all__ = [
    "BILL_TYPES",
    "Option",
    "OptionCollection",
    "Page",
    "PageInfo",
    "PaginationCursor",
    "RawRecord",
    "SearchQuery",
    "UserContext",
    "build_bill",
]
