"""
Factory building a SearchSelectControl for a registered entity, and the
registry keeping controls alive between UI events.
"""

import time
from typing import Callable, Hashable, Iterable

from search_select.config import Settings
from search_select.core.control import SearchSelectControl
from search_select.core.selection import MultiSelection, Selection, SingleSelection
from search_select.entities import get_entity
from search_select.errors import FetchError
from search_select.lib import logs
from search_select.services import get_record_source
from search_select.services.record_source import RecordSource

LOG = logs.logger(__file__)


def create_control(
    entity: str,
    values: Iterable[str] = (),
    labels: dict[str, str] | None = None,
    source: RecordSource | None = None,
    settings: Settings | None = None,
    on_change: Callable[[], None] | None = None,
    on_error: Callable[[FetchError], None] | None = None,
) -> SearchSelectControl:
    """
    Build a control for one field of a form.

    Args:
        entity: Registered entity name ("shop", "category", "vehicle", ...).
        values: Persisted value(s) of the field when editing a record.
        labels: Denormalized names of those values, when the record has them.
        source: Record source override; defaults to the configured source.
        settings: Page size and debounce override; defaults to the environment.
        on_change: Called after every state change of the control.
        on_error: Called with each fetch failure.
    """
    spec = get_entity(entity)
    settings = settings or Settings.from_env()
    values = [v for v in values if v]
    labels = labels or {}
    selection: Selection
    if spec.multiple:
        selection = MultiSelection(values, labels=labels)
    else:
        value = values[0] if values else None
        selection = SingleSelection(value, labels.get(value) if value else None)
    return SearchSelectControl(
        source or get_record_source(spec.name, settings.source_kind, settings=settings),
        spec.projector,
        selection=selection,
        noun=spec.noun,
        page_size=settings.page_size,
        debounce=settings.debounce_seconds,
        on_change=on_change,
        on_error=on_error,
    )


class ControlRegistry:
    """
    Live controls keyed by client session and field.

    A picker normally removes its control on unmount, but a browser tab that
    is closed or loses its connection never unmounts. Every lookup therefore
    also unmounts and drops controls that have not been used for
    ``idle_seconds``.
    """

    def __init__(
        self,
        idle_seconds: float = 1800.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.idle_seconds = idle_seconds
        self._clock = clock
        self._entries: dict[Hashable, tuple[SearchSelectControl, float]] = {}

    def get_or_create(
        self,
        key: Hashable,
        factory: Callable[[], SearchSelectControl],
    ) -> SearchSelectControl:
        """Return the control for a key, building it on first use."""
        now = self._clock()
        self.evict_idle(now)
        entry = self._entries.get(key)
        control = entry[0] if entry is not None else factory()
        self._entries[key] = (control, now)
        return control

    def pop(self, key: Hashable) -> SearchSelectControl | None:
        entry = self._entries.pop(key, None)
        return entry[0] if entry is not None else None

    def evict_idle(self, now: float | None = None) -> int:
        """
        Unmount and drop controls idle for longer than ``idle_seconds``.

        Returns:
            Number of controls evicted.
        """
        now = self._clock() if now is None else now
        idle = [k for k, (_, seen) in self._entries.items() if now - seen > self.idle_seconds]
        for key in idle:
            control, _ = self._entries.pop(key)
            control.unmount()
        if idle:
            LOG.info("Evicted %d idle control(s), %d live", len(idle), len(self._entries))
        return len(idle)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
