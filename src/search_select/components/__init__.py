"""
Reflex UI components for the search-select pickers.

- infinite_scroll: Wrapper for react-infinite-scroll-component
- search_select: One picker bound to a SearchSelectState subclass
- bill_form: Demo bill form composing the shop, category and vehicle pickers
"""

from search_select.components.bill_form import bill_form
from search_select.components.infinite_scroll import InfiniteScroll
from search_select.components.search_select import search_select

__all__ = ["InfiniteScroll", "bill_form", "search_select"]
