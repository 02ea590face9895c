"""
Local library modules shared across the search-select package.

Modules:
    logs: Logging utilities
"""

from search_select.lib import logs

__all__ = ["logs"]
