"""
REST implementation of RecordSource using httpx.

Talks to list endpoints of the form

    GET <base>/<resource>?search=<term>&page=<page>&limit=<limit>

answering ``{"data": {"<resourceKey>": [...], "pagination": {...}}}``, and
to single-record endpoints ``GET <base>/<resource>/<id>`` answering either
the record itself or ``{"data": record}``.

The source reads the nested body through benedict so a missing level turns
into a clear FetchError instead of a KeyError deep inside the control.
"""

from typing import Any

import httpx
from benedict import benedict

from search_select.errors import FetchError
from search_select.lib import logs
from search_select.models.context import UserContext
from search_select.models.pagination import Page, PageInfo, RawRecord, SearchQuery
from search_select.services.record_source import RecordSource

LOG = logs.logger(__file__)


class HttpRecordSource(RecordSource):
    """
    Record source querying a REST backend.

    Args:
        base_url: Backend base URL, e.g. ``https://erp.example.com/api``.
        resource: Path of the list endpoint, e.g. ``shop``.
        resource_key: Key of the record list inside ``data``, e.g. ``shops``.
        context: Current user; its token is sent as a bearer header.
        timeout: Seconds per request. None keeps the httpx default.
        client: Pre-built client, mainly for tests. The source does not
            close a client it did not create.
    """

    def __init__(
        self,
        base_url: str,
        resource: str,
        resource_key: str,
        context: UserContext | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.resource = resource.strip("/")
        self.resource_key = resource_key
        self._owns_client = client is None
        if client is None:
            kwargs: dict[str, Any] = {"base_url": base_url.rstrip("/") + "/"}
            if timeout is not None:
                kwargs["timeout"] = timeout
            client = httpx.AsyncClient(**kwargs)
        self._client = client
        self._headers = (context or UserContext()).auth_headers()

    async def fetch_page(self, term: str, page: int, limit: int) -> Page:
        """
        Fetch one page from the list endpoint.

        Raises:
            FetchError: On transport errors, non-2xx statuses or a body
                missing the record list or pagination block.
        """
        params = SearchQuery(term, page, limit).to_params()
        body = await self._get(self.resource, params)
        if not isinstance(body, dict):
            raise FetchError(f"{self.resource}: response body is not an object")
        b = benedict(body, keypath_separator=None)
        items = b.get(["data", self.resource_key])
        if not isinstance(items, list):
            raise FetchError(
                f"{self.resource}: response has no 'data.{self.resource_key}' list"
            )
        pagination = b.get(["data", "pagination"])
        if not isinstance(pagination, dict):
            raise FetchError(f"{self.resource}: response has no pagination block")
        return Page(items=tuple(items), pagination=PageInfo.from_dict(pagination))

    async def fetch_one(self, value: str) -> RawRecord | None:
        """Fetch one record by identifier; None when the backend has no such record."""
        try:
            body = await self._get(f"{self.resource}/{value}")
        except FetchError as exc:
            if exc.status_code == 404:
                return None
            raise
        record = body.get("data", body) if isinstance(body, dict) else None
        return record if isinstance(record, dict) else None

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        LOG.debug("GET %s params:%s", path, params)
        try:
            response = await self._client.get(path, params=params, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise FetchError(f"{path}: server answered {status}", status_code=status) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"{path}: {type(exc).__name__}: {exc}") from exc
        try:
            return response.json()
        except ValueError as exc:
            raise FetchError(f"{path}: response is not JSON") from exc
