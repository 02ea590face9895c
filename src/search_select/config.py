"""
Environment-driven configuration for the search-select package.

All values are read once when the module is imported. ``Settings`` bundles
them so record sources and controls can be built with explicit values in
tests instead of reading the environment.
"""

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes"}


def _int(key: str, default: int) -> int:
    raw = os.getenv(key, "").strip()
    return int(raw) if raw else default


def _float_or_none(key: str) -> float | None:
    raw = os.getenv(key, "").strip()
    return float(raw) if raw else None


# Observed defaults of the bill forms: 30 rows per page, 500 ms quiet period
DEFAULT_PAGE_SIZE = 30
DEFAULT_DEBOUNCE_MS = 500

SOURCE_KIND = os.getenv("SEARCH_SELECT_SOURCE", "demo").lower()
API_URL = os.getenv("SEARCH_SELECT_API_URL", "http://localhost:5000/api")
PAGE_SIZE = _int("SEARCH_SELECT_PAGE_SIZE", DEFAULT_PAGE_SIZE)
DEBOUNCE_MS = _int("SEARCH_SELECT_DEBOUNCE_MS", DEFAULT_DEBOUNCE_MS)
HTTP_TIMEOUT = _float_or_none("SEARCH_SELECT_HTTP_TIMEOUT")
DEMO_LATENCY_MS = _int("SEARCH_SELECT_DEMO_LATENCY_MS", 150)
# Controls of browser tabs that closed without unmounting are dropped after this
CONTROL_IDLE_SECONDS = _int("SEARCH_SELECT_CONTROL_IDLE_S", 1800)
AUTH_TOKEN = os.getenv("SEARCH_SELECT_TOKEN") or None
USER_ROLE = os.getenv("SEARCH_SELECT_USER_ROLE", "admin")
USE_GENERIC_BRANDING = os.getenv("SEARCH_SELECT_GENERIC", "false").lower() in _TRUTHY
APP_PORT = int(os.getenv("DATABRICKS_APP_PORT", os.getenv("APP_PORT", "8000")))


@dataclass(frozen=True)
class Settings:
    """
    Resolved configuration values.

    Attributes:
        source_kind: Record source implementation ("demo" or "http").
        api_url: Base URL of the REST backend.
        page_size: Rows requested per page.
        debounce_ms: Quiet period before a search term is fetched.
        http_timeout: Seconds for HTTP calls, None keeps the httpx default.
        demo_latency_ms: Simulated latency of the demo source.
    """

    source_kind: str = "demo"
    api_url: str = "http://localhost:5000/api"
    page_size: int = DEFAULT_PAGE_SIZE
    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    http_timeout: float | None = None
    demo_latency_ms: int = 0

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the module-level environment values."""
        return cls(
            source_kind=SOURCE_KIND,
            api_url=API_URL,
            page_size=max(PAGE_SIZE, 1),
            debounce_ms=max(DEBOUNCE_MS, 0),
            http_timeout=HTTP_TIMEOUT,
            demo_latency_ms=max(DEMO_LATENCY_MS, 0),
        )
