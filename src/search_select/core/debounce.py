"""
Debounce gate for search-text events.

Each ``notify`` cancels the unfired timer of the previous call and starts a
new one; only the last term of a burst reaches ``on_settled``.
"""

import asyncio
from typing import Callable

from search_select.lib import logs

LOG = logs.logger(__file__)


class DebounceGate:
    """
    Delays search terms until typing pauses for ``delay`` seconds.

    Must be used from a running event loop. ``on_settled`` is called
    synchronously from the timer task, so whatever it schedules is visible
    as soon as the task returned by ``notify`` completes.
    """

    def __init__(self, on_settled: Callable[[str], None], delay: float = 0.5) -> None:
        self._on_settled = on_settled
        self._delay = delay
        self._timer: asyncio.Task | None = None
        self._closed = False
        self.last_settled: str | None = None

    @property
    def pending(self) -> bool:
        """True while a timer is waiting to fire."""
        return self._timer is not None and not self._timer.done()

    def notify(self, term: str) -> asyncio.Task:
        """
        Schedule ``on_settled(term)`` after the quiet period.

        Returns:
            The timer task. It is cancelled when a later ``notify`` or
            ``cancel`` supersedes it, so awaiting it directly raises
            CancelledError; use ``asyncio.wait`` to wait without raising.
        """
        self.cancel()
        timer = asyncio.get_running_loop().create_task(self._fire(term))
        if not self._closed:
            self._timer = timer
        else:
            timer.cancel()
        return timer

    def cancel(self) -> None:
        """Abandon the pending timer, if any, without firing it."""
        if self.pending:
            self._timer.cancel()
        self._timer = None

    def close(self) -> None:
        """Cancel the pending timer and ignore any later ``notify``."""
        self._closed = True
        self.cancel()

    async def _fire(self, term: str) -> None:
        await asyncio.sleep(self._delay)
        if self._closed:
            return
        self._timer = None
        self.last_settled = term
        LOG.debug("Settled term: %r", term)
        self._on_settled(term)
