"""
Record source factory for the search-select package.

This module provides the get_record_source() factory function that returns
the appropriate RecordSource implementation for an entity based on
configuration.

Available Implementations:
- demo: In-memory source with static records (no backend required)
- http: REST source querying the configured backend with httpx

Sources are cached per (entity, kind) at the module level, so the same
instance is reused across controls. Configure via SEARCH_SELECT_SOURCE.
"""

from functools import cache
from typing import Callable, Dict

from search_select.config import Settings
from search_select.entities import EntitySpec, get_entity
from search_select.errors import UnknownEntityError
from search_select.lib import logs
from search_select.models.context import UserContext
from search_select.services.demo import DemoRecordSource
from search_select.services.http import HttpRecordSource
from search_select.services.record_source import RecordSource

LOG = logs.logger(__file__)

_SOURCE_REGISTRY: Dict[str, Callable[[EntitySpec, UserContext, Settings], RecordSource]] = {
    "demo": lambda spec, context, settings: DemoRecordSource(
        spec.name, latency=settings.demo_latency_ms / 1000.0
    ),
    "http": lambda spec, context, settings: HttpRecordSource(
        settings.api_url,
        spec.resource,
        spec.resource_key,
        context=context,
        timeout=settings.http_timeout,
    ),
}


@cache
def get_record_source(
    entity: str,
    kind: str | None = None,
    context: UserContext | None = None,
    settings: Settings | None = None,
) -> RecordSource:
    """
    Return the configured record source for an entity.

    Args:
        entity: Registered entity name.
        kind: Source kind override; defaults to ``settings.source_kind``.
        context: Current user; defaults to the configured token and role.
        settings: Backend URL, timeout and demo latency; defaults to the
            environment.
    """
    settings = settings or Settings.from_env()
    resolved_kind = (kind or settings.source_kind).lower()
    LOG.info("get_record_source - entity:%s kind:%s resolved_kind:%s", entity, kind, resolved_kind)
    try:
        factory = _SOURCE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown record source kind: {resolved_kind}"
        raise UnknownEntityError(msg) from exc
    return factory(get_entity(entity), context or UserContext.from_env(), settings)


__all__ = [
    "DemoRecordSource",
    "HttpRecordSource",
    "RecordSource",
    "get_record_source",
]
