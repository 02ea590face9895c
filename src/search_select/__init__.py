"""
Search Select: paginated, debounced search pickers over a REST backend.

This package provides a headless asyncio engine for server-backed
search-select fields (debounce, paginated fetch with stale-response
discarding, option projection, selection) and a Reflex UI on top of it.

Subpackages:
- core: Headless engine (debounce gate, fetch coordinator, selection, control)
- services: Record sources (demo and REST implementations)
- models: Pagination and option data models
- components: Reflex UI components
- data: Static demo fixtures

Main entry points:
- controls.create_control(): Build a control for a registered entity
- app.main(): Start the demo app
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
