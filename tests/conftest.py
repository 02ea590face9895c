"""
Pytest configuration and shared fixtures.

Provides record sources whose responses the tests control, so overlapping
and out-of-order requests can be reproduced deterministically.
"""

import asyncio

import pytest

from search_select.core.projector import FieldProjector
from search_select.models.pagination import Page
from search_select.services.record_source import RecordSource


class ScriptedSource(RecordSource):
    """
    Record source that parks every request until the test answers it.

    Attributes:
        calls: (term, page, limit) of every fetch_page call, in order.
        lookups: Values passed to fetch_one.
    """

    def __init__(self, records: dict[str, dict] | None = None) -> None:
        self.calls: list[tuple[str, int, int]] = []
        self.lookups: list[str] = []
        self._records = records or {}
        self._pending: dict[tuple[str, int], asyncio.Future] = {}

    async def fetch_page(self, term: str, page: int, limit: int) -> Page:
        self.calls.append((term, page, limit))
        future = asyncio.get_running_loop().create_future()
        self._pending[(term, page)] = future
        return await future

    async def fetch_one(self, value: str):
        self.lookups.append(value)
        return self._records.get(value)

    def is_waiting(self, term: str, page: int) -> bool:
        return (term, page) in self._pending

    def respond(self, term: str, page: int, result: Page) -> None:
        self._pending.pop((term, page)).set_result(result)

    def fail(self, term: str, page: int, exc: Exception) -> None:
        self._pending.pop((term, page)).set_exception(exc)


def shop_page(
    names: list[tuple[str, str]],
    page: int = 1,
    limit: int = 30,
    total: int | None = None,
) -> Page:
    """Build a page of shop records from (id, name) pairs."""
    records = [{"_id": _id, "shopName": name} for _id, name in names]
    return Page.of(records, page, limit, len(records) if total is None else total)


async def settle(times: int = 5) -> None:
    """Let pending callbacks and tasks run."""
    for _ in range(times):
        await asyncio.sleep(0)


@pytest.fixture
def source():
    return ScriptedSource()


@pytest.fixture
def shop_projector():
    return FieldProjector("shopName")
