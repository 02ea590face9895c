"""
Search-select control: the composition root of one searchable field.

Wires the debounce gate, the fetch coordinator and a selection model into
the contract a text input plus an infinite-scroll dropdown needs:

    keystroke -> SEARCHING -> (settle) -> LOADING -> LOADED
    scroll to bottom (has_more) -> LOADING_MORE -> LOADED (appended)
    unmount -> CLOSED

The control is headless. UI layers call its methods from their event
handlers and render ``snapshot()``.
"""

import asyncio
from enum import Enum
from typing import Any, Callable, Iterable

from search_select.core.coordinator import FetchCoordinator, Ticket
from search_select.core.debounce import DebounceGate
from search_select.core.projector import Projector
from search_select.core.selection import MultiSelection, Selection, SingleSelection
from search_select.errors import FetchError
from search_select.lib import logs
from search_select.models.option import Option
from search_select.services.record_source import RecordSource

LOG = logs.logger(__file__)


class ControlStatus(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    LOADING = "loading"
    LOADED = "loaded"
    LOADING_MORE = "loading_more"
    CLOSED = "closed"


class SearchSelectControl:
    """
    One search-select field backed by a paginated record source.

    Args:
        source: Record source of the entity being searched.
        projector: Maps raw records to options.
        selection: Single or multi selection, seeded with the persisted value.
        noun: Plural display noun used in messages ("shops").
        page_size: Rows requested per page.
        debounce: Quiet period in seconds before a term is fetched.
        on_change: Called after every state change, never after unmount.
        on_error: Called with each failure of a current request.
    """

    def __init__(
        self,
        source: RecordSource,
        projector: Projector,
        selection: Selection | None = None,
        noun: str = "options",
        page_size: int = 30,
        debounce: float = 0.5,
        on_change: Callable[[], None] | None = None,
        on_error: Callable[[FetchError], None] | None = None,
    ) -> None:
        self._source = source
        self._projector = projector
        self._on_change = on_change
        self._on_error = on_error
        self.noun = noun
        self.selection: Selection = selection if selection is not None else SingleSelection()
        self.input_term = ""
        self._status = ControlStatus.IDLE
        self._fetch: asyncio.Task | None = None
        self._coordinator = FetchCoordinator(
            source,
            projector,
            page_size=page_size,
            on_change=self._changed,
            on_error=self._failed,
            name=noun,
        )
        self._gate = DebounceGate(self._settled, delay=debounce)

    # State

    @property
    def status(self) -> ControlStatus:
        if self._status is ControlStatus.CLOSED:
            return self._status
        if self._gate.pending:
            return ControlStatus.SEARCHING
        active = self._coordinator.active
        if active is not None:
            return ControlStatus.LOADING if active.page == 1 else ControlStatus.LOADING_MORE
        return self._status

    @property
    def options(self) -> list[Option]:
        return list(self._coordinator.options)

    @property
    def loading(self) -> bool:
        return self._coordinator.loading

    @property
    def has_more(self) -> bool:
        """More pages exist for the term the loaded options belong to."""
        return self._coordinator.settled and self._coordinator.cursor.has_more

    @property
    def total(self) -> int:
        return self._coordinator.cursor.total

    @property
    def term(self) -> str:
        """Term the loaded options belong to."""
        return self._coordinator.loaded_term

    @property
    def error(self) -> FetchError | None:
        return self._coordinator.error

    @property
    def pending_fetch(self) -> asyncio.Task | None:
        """Task of the in-flight fetch, if any."""
        if self._fetch is not None and not self._fetch.done():
            return self._fetch
        return None

    @property
    def message(self) -> str:
        """Text to show in place of, or below, the option list."""
        status = self.status
        if status is ControlStatus.LOADING or (
            status is ControlStatus.IDLE and not len(self._coordinator.options)
        ):
            return f"Loading {self.noun}..."
        if self.error is not None:
            return f"Could not load {self.noun}: {self.error}"
        if status is ControlStatus.LOADED and not len(self._coordinator.options):
            return f"No {self.noun} found"
        return ""

    def current(self) -> Option | list[Option] | None:
        """Selected option(s), labelled even when outside the loaded pages."""
        return self.selection.current(self._coordinator.options)

    def selected_values(self) -> list[str]:
        """Selected values, in the order they will be submitted."""
        return self.selection.values

    def snapshot(self) -> dict[str, Any]:
        """Plain-data view of the control for rendering."""
        current = self.current()
        if isinstance(current, list):
            selected = [o.to_dict() for o in current]
        else:
            selected = [current.to_dict()] if current else []
        return {
            "options": self._coordinator.options.to_list(),
            "selected": selected,
            "input_term": self.input_term,
            "status": self.status.value,
            "loading": self.loading,
            "has_more": self.has_more,
            "total": self.total,
            "message": self.message,
            "error": str(self.error) if self.error else "",
        }

    # Lifecycle

    async def mount(self) -> None:
        """Load the first unfiltered page and label out-of-window selections."""
        if self._status is ControlStatus.CLOSED:
            return
        fetch = self._launch("", 1)
        await asyncio.wait({fetch})
        if fetch.cancelled():
            return
        await self.resolve_selection()

    def unmount(self) -> None:
        """Cancel the pending debounce and make in-flight fetches no-ops."""
        if self._status is ControlStatus.CLOSED:
            return
        self._status = ControlStatus.CLOSED
        self._gate.close()
        self._coordinator.close()
        if self.pending_fetch is not None:
            self._fetch.cancel()
        self._fetch = None
        LOG.debug("%s: unmounted", self.noun)

    # Events

    def input_changed(self, term: str) -> asyncio.Task:
        """
        Record a keystroke; the fetch starts once typing pauses.

        Returns:
            The debounce timer task.
        """
        self.input_term = term
        task = self._gate.notify(term)
        self._changed()
        return task

    def scroll_to_bottom(self) -> asyncio.Task | None:
        """
        Fetch the next page of the current term, if there is one.

        Returns:
            The fetch task, or None when nothing was requested.
        """
        if self._status is ControlStatus.CLOSED or self._gate.pending:
            return None
        if not self._coordinator.can_load_more():
            return None
        return self._launch(self.term, self._coordinator.cursor.next_page())

    def retry(self) -> asyncio.Task | None:
        """Re-issue the last failed request of the current term."""
        failed = self._coordinator.failed
        if self._status is ControlStatus.CLOSED or failed is None or self.loading:
            return None
        return self._launch(failed.term, failed.page)

    def select(self, value: str | None) -> None:
        """Select a value in a single-select field, or clear it with None."""
        if isinstance(self.selection, MultiSelection):
            raise TypeError("select() is for single-select fields; use toggle()")
        self.selection.select(value, self._label(value))
        self._changed()

    def toggle(self, value: str) -> None:
        """Add or remove a value in a multi-select field."""
        if not isinstance(self.selection, MultiSelection):
            raise TypeError("toggle() is for multi-select fields; use select()")
        self.selection.toggle(value, self._label(value))
        self._changed()

    def clear(self) -> None:
        self.selection.clear()
        self._changed()

    async def resolve_selection(self) -> None:
        """Look up labels of selected values that no loaded page contains."""
        for value in self.selection.unresolved(self._coordinator.options):
            try:
                record = await self._source.fetch_one(value)
            except Exception:
                LOG.warning("%s: lookup of %s failed", self.noun, value, exc_info=True)
                continue
            if self._status is ControlStatus.CLOSED:
                return
            option = self._projector(record) if record else None
            if option is not None:
                self.selection.remember([option])
                self._changed()

    def set_values(self, values: Iterable[str], labels: dict[str, str] | None = None) -> None:
        """Replace the selection with persisted values, e.g. when editing."""
        values = [v for v in values if v]
        labelled = [Option(label=labels[v], value=v) for v in values if labels and labels.get(v)]
        self.selection.remember(labelled)
        if isinstance(self.selection, MultiSelection):
            self.selection.set_values(values)
        else:
            self.selection.select(values[0] if values else None)
        self._changed()

    # Internals

    def _settled(self, term: str) -> None:
        self._launch(term, 1)

    def _launch(self, term: str, page: int) -> asyncio.Task:
        ticket = self._coordinator.begin(term, page)
        task = asyncio.get_running_loop().create_task(self._run(ticket))
        self._fetch = task
        return task

    async def _run(self, ticket: Ticket) -> None:
        page = await self._coordinator.run(ticket)
        if page is not None and self._status is not ControlStatus.CLOSED:
            self.selection.remember(self._coordinator.options)
            self._status = ControlStatus.LOADED
            self._changed()
        elif self._coordinator.is_current(ticket) and not self.loading:
            self._status = ControlStatus.LOADED

    def _label(self, value: str | None) -> str | None:
        if not value:
            return None
        option = self._coordinator.options.get(value)
        return option.label if option else None

    def _failed(self, error: FetchError, ticket: Ticket) -> None:
        if self._on_error is not None:
            self._on_error(error)

    def _changed(self) -> None:
        if self._on_change is not None and self._status is not ControlStatus.CLOSED:
            self._on_change()
