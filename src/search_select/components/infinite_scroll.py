"""
Infinite scroll component wrapper for react-infinite-scroll-component.

Calls ``next`` when the option list is scrolled to the bottom. Inside a
picker the list scrolls in its own container, so ``scrollable_target``
names that container's id.
"""

import reflex as rx


class InfiniteScroll(rx.NoSSRComponent):
    """Wrapper for react-infinite-scroll-component."""

    library = "react-infinite-scroll-component"
    tag = "InfiniteScroll"
    is_default = True

    data_length: int
    next: rx.EventHandler
    has_more: bool

    loader: rx.Component | None = None
    end_message: rx.Component | None = None
    scrollable_target: str | None = None
    scroll_threshold: float | None = None
