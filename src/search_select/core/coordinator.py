"""
Fetch coordinator: issues paginated searches and merges their results.

Every request is tagged with a ticket carrying the generation and term it
was issued under. A page-1 request starts a new generation; load-more
requests reuse the current one. A response is applied only if its ticket is
still current, so a slow reply for an old term can never overwrite the
results of a newer one, whatever order the network delivers them in.
"""

import asyncio
from dataclasses import dataclass
from typing import Callable

from search_select.core.projector import Projector, project
from search_select.errors import FetchError
from search_select.lib import logs
from search_select.models.option import OptionCollection
from search_select.models.pagination import Page, PaginationCursor
from search_select.services.record_source import RecordSource

LOG = logs.logger(__file__)


@dataclass(frozen=True, slots=True)
class Ticket:
    """Tag of one in-flight request."""

    generation: int
    term: str
    page: int


class FetchCoordinator:
    """
    Owns the option collection, cursor and loading flag of one field.

    Failures are caught here: the previous options stay in place, the error
    is kept on ``error`` and passed to ``on_error``. They never propagate to
    the caller.

    Attributes:
        options: Options loaded for the current term.
        cursor: Pagination position for the current term.
        loading: True while the current request is in flight.
        error: Failure of the last current request, cleared on success.
        term: Term of the current generation, set when its request begins.
        loaded_term: Term the loaded options belong to, set when its first
            page arrives.
    """

    def __init__(
        self,
        source: RecordSource,
        projector: Projector,
        page_size: int = 30,
        on_change: Callable[[], None] | None = None,
        on_error: Callable[[FetchError, Ticket], None] | None = None,
        name: str = "field",
    ) -> None:
        self._source = source
        self._projector = projector
        self._on_change = on_change
        self._on_error = on_error
        self._name = name
        self.options = OptionCollection()
        self.cursor = PaginationCursor(limit=max(page_size, 1))
        self.loading = False
        self.error: FetchError | None = None
        self.term = ""
        self.loaded_term = ""
        self.failed: Ticket | None = None
        self._generation = 0
        self._loaded_generation: int | None = None
        self._active: Ticket | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def settled(self) -> bool:
        """True once the first page of the current generation has arrived."""
        return not self._closed and self._loaded_generation == self._generation

    def can_load_more(self) -> bool:
        """True when the next page of the loaded term may be requested."""
        return self.settled and self._active is None and self.cursor.has_more

    @property
    def active(self) -> Ticket | None:
        """Ticket of the current in-flight request, if any."""
        return self._active

    def begin(self, term: str, page: int = 1) -> Ticket:
        """
        Start a request and mark the field as loading.

        A page-1 request supersedes everything issued before it.
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        if page == 1:
            self._generation += 1
            self.term = term
        ticket = Ticket(self._generation, term, page)
        if self._closed:
            return ticket
        self._active = ticket
        self.loading = True
        self._changed()
        return ticket

    def is_current(self, ticket: Ticket) -> bool:
        return (
            not self._closed
            and ticket.generation == self._generation
            and ticket.term == self.term
        )

    async def run(self, ticket: Ticket) -> Page | None:
        """
        Perform the request of a ticket and apply its result.

        Returns:
            The page if it was applied, None if it failed or went stale.
        """
        try:
            page = await self._source.fetch_page(
                ticket.term, ticket.page, self.cursor.limit
            )
        except asyncio.CancelledError:
            self._release(ticket)
            raise
        except Exception as exc:
            self._fail(ticket, exc)
            return None
        return page if self._apply(ticket, page) else None

    async def search(self, term: str, page: int = 1) -> Page | None:
        """Begin and run a request in one step."""
        return await self.run(self.begin(term, page))

    def close(self) -> None:
        """Turn every later resolution into a no-op."""
        self._closed = True
        self._active = None

    def _apply(self, ticket: Ticket, page: Page) -> bool:
        if not self.is_current(ticket):
            LOG.debug("%s: discarding stale page %s for %r", self._name, ticket.page, ticket.term)
            return False
        options = project(page.items, self._projector)
        if ticket.page == 1:
            self.options.replace(options)
            self._loaded_generation = ticket.generation
            self.loaded_term = ticket.term
        else:
            added = self.options.extend(options)
            if added < len(options):
                LOG.warning(
                    "%s: page %s repeated %d option(s) already loaded",
                    self._name,
                    ticket.page,
                    len(options) - added,
                )
        self.cursor.advance(page.pagination, page=ticket.page)
        self.error = None
        self.failed = None
        self._release(ticket, notify=False)
        self._changed()
        return True

    def _fail(self, ticket: Ticket, exc: Exception) -> None:
        if not self.is_current(ticket):
            LOG.debug("%s: ignoring failure of stale request %s", self._name, ticket)
            return
        LOG.error(
            "%s: search failed - term:%r page:%s", self._name, ticket.term, ticket.page,
            exc_info=exc,
        )
        error = exc if isinstance(exc, FetchError) else FetchError(str(exc) or type(exc).__name__)
        if error is not exc:
            error.__cause__ = exc
        self.error = error
        self.failed = ticket
        self._release(ticket, notify=False)
        self._changed()
        if self._on_error is not None:
            self._on_error(error, ticket)

    def _release(self, ticket: Ticket, notify: bool = True) -> None:
        if self._closed or self._active != ticket:
            return
        self._active = None
        self.loading = False
        if notify:
            self._changed()

    def _changed(self) -> None:
        if self._on_change is not None and not self._closed:
            self._on_change()
