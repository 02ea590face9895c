"""
Demo implementation of RecordSource using static in-memory records.

This source is useful for:
- Local development without a running backend
- Testing the control with realistic data and latency
- Demonstrating the pickers without network dependencies

Filtering is a case-insensitive substring match over every string field of
a record, and results keep the fixture order so pages never overlap.
"""

import asyncio
from typing import Sequence

from search_select.data.demo_records import DEMO_RECORDS
from search_select.errors import UnknownEntityError
from search_select.lib import logs
from search_select.models.pagination import Page, RawRecord
from search_select.services.record_source import RecordSource

LOG = logs.logger(__file__)


class DemoRecordSource(RecordSource):
    """
    In-memory record source backed by static demo data.

    Attributes:
        entity: Name of the entity the records belong to.
        latency: Simulated network delay in seconds per call.
    """

    def __init__(
        self,
        entity: str,
        records: Sequence[RawRecord] | None = None,
        latency: float = 0.0,
        id_key: str = "_id",
    ) -> None:
        """
        Initialize with record data.

        Args:
            entity: Entity name, used to pick the demo fixture.
            records: Custom record list, or None to use DEMO_RECORDS.
            latency: Seconds to sleep before answering.
            id_key: Key holding the record identifier.

        Raises:
            UnknownEntityError: If no records are given and the entity has
                no demo fixture.
        """
        if records is None:
            try:
                records = DEMO_RECORDS[entity]
            except KeyError as exc:
                msg = f"No demo records for entity: {entity}"
                raise UnknownEntityError(msg) from exc
        self.entity = entity
        self.latency = latency
        self._records: Sequence[RawRecord] = records
        self._id_key = id_key

    async def fetch_page(self, term: str, page: int, limit: int) -> Page:
        """Return a page of the records matching the term."""
        await self._delay()
        filtered = self._apply_filter(term)
        page, limit = max(page, 1), max(limit, 1)
        start = (page - 1) * limit
        LOG.debug("%s: term:%r page:%s matched:%d", self.entity, term, page, len(filtered))
        return Page.of(filtered[start : start + limit], page, limit, len(filtered))

    async def fetch_one(self, value: str) -> RawRecord | None:
        await self._delay()
        return next(
            (r for r in self._records if str(r.get(self._id_key)) == value),
            None,
        )

    def _apply_filter(self, term: str | None) -> list[RawRecord]:
        normalized = (term or "").strip().lower()
        if not normalized:
            return list(self._records)
        return [r for r in self._records if _matches(r, normalized, self._id_key)]

    async def _delay(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)


def _matches(record: RawRecord, normalized: str, id_key: str) -> bool:
    return any(
        normalized in value.lower()
        for key, value in record.items()
        if isinstance(value, str) and key != id_key
    )
