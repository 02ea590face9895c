"""
Reflex state management for the search-select pickers.

Each picker is a substate built from the SearchSelectState mixin. The
headless SearchSelectControl owning the debounce timer and in-flight fetches
cannot live in serialized state, so controls are kept per client token and
field in a module-level registry. They are disposed when the picker
unmounts, or after sitting idle when the tab went away without unmounting.
The state vars mirror ``control.snapshot()``.
"""

import asyncio
import json
from typing import ClassVar

import reflex as rx

from search_select import config
from search_select.controls import ControlRegistry, create_control
from search_select.core.control import SearchSelectControl
from search_select.lib import logs
from search_select.models.bill import build_bill

LOG = logs.logger(__file__)

# Branding configuration
APP_TITLE = "Search Select" if config.USE_GENERIC_BRANDING else "Bill Entry"
APP_SUBTITLE = (
    "Paginated, debounced pickers over a REST backend."
    if config.USE_GENERIC_BRANDING
    else "Record a fuel or general bill against a shop, category and vehicles."
)

# Bill being edited by the demo page. Shop s87 sits far beyond the first
# page; v60 carries its denormalized number, s87 is looked up on mount.
DEMO_BILL = {
    "shop": "s87",
    "category": "c9",
    "vehicles": ["v3", "v60"],
    "vehicleNumbers": {"v60": "RAK 12183"},
}

_CONTROLS = ControlRegistry(idle_seconds=config.CONTROL_IDLE_SECONDS)


class SearchSelectState(rx.State, mixin=True):
    """
    State of one search-select picker.

    Subclasses set ``entity`` and, when editing, the seed values.
    """

    entity: ClassVar[str] = ""
    seed_values: ClassVar[tuple[str, ...]] = ()
    seed_labels: ClassVar[dict[str, str]] = {}

    options: list[dict[str, str]] = []
    selected: list[dict[str, str]] = []
    input_term: str = ""
    status: str = "idle"
    loading: bool = False
    has_more: bool = False
    total: int = 0
    message: str = ""
    error: str = ""

    @rx.var
    def selected_values(self) -> list[str]:
        """Values of the selected options."""
        return [option["value"] for option in self.selected]

    @rx.var
    def show_message(self) -> bool:
        return self.message != ""

    @rx.event(background=True)
    async def on_mount(self):
        """Load the first page and label seeded selections."""
        async with self:
            control = self._control()
            self._sync(control)
        await control.mount()
        async with self:
            self._sync(control)

    @rx.event(background=True)
    async def search(self, term: str):
        """
        Event handler for keystrokes in the picker's input.

        Superseded keystrokes return once their debounce timer is
        cancelled; only the settled one waits for its fetch.

        Args:
            term: The current input text.
        """
        async with self:
            control = self._control()
            timer = control.input_changed(term)
            self._sync(control)
        await asyncio.wait({timer})
        if timer.cancelled():
            return
        async with self:
            self._sync(control)
        await self._finish(control, control.pending_fetch)

    @rx.event(background=True)
    async def load_more(self):
        """Event handler for infinite scroll pagination."""
        async with self:
            control = self._control()
            fetch = control.scroll_to_bottom()
            self._sync(control)
        LOG.info("%s: load more - requested:%s", self.entity, fetch is not None)
        await self._finish(control, fetch)

    @rx.event(background=True)
    async def retry(self):
        """Re-issue the request that failed last."""
        async with self:
            control = self._control()
            fetch = control.retry()
            self._sync(control)
        await self._finish(control, fetch)

    @rx.event
    def choose(self, value: str):
        """Select an option; toggles it in multi-select pickers."""
        control = self._control()
        if control.selection.multiple:
            control.toggle(value)
        else:
            control.select(value)
        self._sync(control)

    @rx.event
    def remove(self, value: str):
        """Drop a selected value."""
        control = self._control()
        if control.selection.multiple:
            if value in control.selected_values():
                control.toggle(value)
        else:
            control.select(None)
        self._sync(control)

    @rx.event
    def on_unmount(self):
        """Cancel the pending debounce and discard in-flight fetches."""
        control = _CONTROLS.pop(self._key())
        if control is not None:
            control.unmount()

    def _key(self) -> tuple[str, str]:
        return (self.router.session.client_token, self.get_full_name())

    def _control(self) -> SearchSelectControl:
        return _CONTROLS.get_or_create(
            self._key(),
            lambda: create_control(
                self.entity,
                values=self.seed_values,
                labels=self.seed_labels,
            ),
        )

    def _sync(self, control: SearchSelectControl) -> None:
        snapshot = control.snapshot()
        self.options = snapshot["options"]
        self.selected = snapshot["selected"]
        self.input_term = snapshot["input_term"]
        self.status = snapshot["status"]
        self.loading = snapshot["loading"]
        self.has_more = snapshot["has_more"]
        self.total = snapshot["total"]
        self.message = snapshot["message"]
        self.error = snapshot["error"]

    async def _finish(self, control: SearchSelectControl, fetch: asyncio.Task | None) -> None:
        if fetch is None:
            return
        await asyncio.wait({fetch})
        async with self:
            self._sync(control)


class ShopSelectState(SearchSelectState, rx.State):
    entity: ClassVar[str] = "shop"
    seed_values: ClassVar[tuple[str, ...]] = (DEMO_BILL["shop"],)


class CategorySelectState(SearchSelectState, rx.State):
    entity: ClassVar[str] = "category"
    seed_values: ClassVar[tuple[str, ...]] = (DEMO_BILL["category"],)


class VehicleSelectState(SearchSelectState, rx.State):
    entity: ClassVar[str] = "vehicle"
    seed_values: ClassVar[tuple[str, ...]] = tuple(DEMO_BILL["vehicles"])
    seed_labels: ClassVar[dict[str, str]] = DEMO_BILL["vehicleNumbers"]


class BillFormState(rx.State):
    """Collects the pickers' selections into a bill record on submit."""

    submitted: str = ""
    form_error: str = ""

    @rx.event
    async def handle_submit(self, form_data: dict):
        """
        Serialize the form and the picker selections.

        Args:
            form_data: Values of the plain form inputs.
        """
        shop = await self.get_state(ShopSelectState)
        category = await self.get_state(CategorySelectState)
        vehicles = await self.get_state(VehicleSelectState)
        bill = build_bill(
            form_data,
            shop=shop.selected_values,
            category=category.selected_values,
            vehicles=vehicles.selected_values,
        )
        if not bill["shop"]:
            self.form_error = "Shop is required"
            return
        self.form_error = ""
        self.submitted = json.dumps(bill, indent=2)
        LOG.info("Bill submitted: %s", self.submitted)
