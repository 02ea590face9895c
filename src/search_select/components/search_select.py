"""
Search-select picker component.

Renders one picker bound to a SearchSelectState subclass:
- Selected values as removable chips (labelled even when off-page)
- A text input feeding the debounced search
- The option list with infinite scroll, or the loading message while
  page 1 of a new term is in flight
- The no-options / error message and a retry button after failures
"""

import reflex as rx

from search_select.components.infinite_scroll import InfiniteScroll
from search_select.state import SearchSelectState

# Fraction of the list scrolled before the next page is requested
SCROLL_THRESHOLD = 0.9


def search_select(
    state: type[SearchSelectState],
    label: str,
    placeholder: str,
    list_id: str,
) -> rx.Component:
    """
    Build a picker for one search field.

    Args:
        state: Picker state class, e.g. ShopSelectState.
        label: Field label shown above the input.
        placeholder: Input placeholder text.
        list_id: DOM id of the scrolling option list.

    Returns:
        The picker component.
    """
    return rx.box(
        rx.text(label, class_name="field-label"),
        _chips(state),
        rx.box(
            rx.icon("search", class_name="input-icon"),
            rx.input(
                placeholder=placeholder,
                default_value="",
                on_change=state.search,
                class_name="search-input",
            ),
            class_name="input-with-icon",
        ),
        rx.cond(
            state.status == "loading",
            _message(state.message),
            _options(state, list_id),
        ),
        rx.cond(
            state.error != "",
            rx.button("Retry", on_click=state.retry, size="1", variant="soft"),
        ),
        class_name="search-select",
        on_mount=state.on_mount,
        on_unmount=state.on_unmount,
    )


def _chips(state: type[SearchSelectState]) -> rx.Component:
    return rx.hstack(
        rx.foreach(
            state.selected,
            lambda option: rx.badge(
                option["label"],
                rx.icon(
                    "x",
                    size=12,
                    on_click=state.remove(option["value"]),
                    class_name="chip-remove",
                ),
                class_name="chip",
            ),
        ),
        wrap="wrap",
        class_name="chips",
    )


def _options(state: type[SearchSelectState], list_id: str) -> rx.Component:
    return rx.box(
        InfiniteScroll.create(
            rx.foreach(state.options, lambda option: _option(state, option)),
            data_length=state.options.length(),
            next=state.load_more,
            has_more=state.has_more,
            loader=rx.text("Loading more...", class_name="muted load-more-hint"),
            scrollable_target=list_id,
            scroll_threshold=SCROLL_THRESHOLD,
        ),
        rx.cond(state.show_message, _message(state.message)),
        id=list_id,
        class_name="option-list",
    )


def _option(state: type[SearchSelectState], option: rx.Var) -> rx.Component:
    return rx.box(
        rx.text(option["label"]),
        on_click=state.choose(option["value"]),
        class_name=rx.cond(
            state.selected_values.contains(option["value"]),
            "option selected",
            "option",
        ),
    )


def _message(text: rx.Var) -> rx.Component:
    return rx.text(text, class_name="muted option-message")
