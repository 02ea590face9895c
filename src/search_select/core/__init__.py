"""
Headless search-select engine.

Modules:
- debounce: DebounceGate delaying search terms until typing pauses
- projector: Raw record to Option mapping
- coordinator: FetchCoordinator with stale-response discarding
- selection: Single and multi selection models
- control: SearchSelectControl composing all of the above
"""

from search_select.core.control import ControlStatus, SearchSelectControl
from search_select.core.coordinator import FetchCoordinator, Ticket
from search_select.core.debounce import DebounceGate
from search_select.core.projector import FieldProjector, Projector, project
from search_select.core.selection import MultiSelection, Selection, SingleSelection

__all__ = [
    "ControlStatus",
    "DebounceGate",
    "FetchCoordinator",
    "FieldProjector",
    "MultiSelection",
    "Projector",
    "SearchSelectControl",
    "Selection",
    "SingleSelection",
    "Ticket",
    "project",
]
