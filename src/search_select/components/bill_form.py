"""
Bill form composing the shop, category and vehicle pickers.
"""

import reflex as rx

from search_select.components.search_select import search_select
from search_select.models.bill import BILL_TYPES
from search_select.state import (
    BillFormState,
    CategorySelectState,
    ShopSelectState,
    VehicleSelectState,
)


def bill_form() -> rx.Component:
    """
    Build the bill entry card.

    Plain inputs travel in the submit payload; picker selections are read
    from the picker states by BillFormState.handle_submit.
    """
    return rx.box(
        rx.form(
            rx.vstack(
                rx.select(
                    list(BILL_TYPES),
                    name="billType",
                    default_value=BILL_TYPES[0],
                ),
                rx.input(name="description", placeholder="Description"),
                rx.input(name="amount", placeholder="Amount", type="number"),
                search_select(ShopSelectState, "Shop", "Search shops...", "shop-options"),
                search_select(
                    CategorySelectState,
                    "Category",
                    "Search categories...",
                    "category-options",
                ),
                search_select(
                    VehicleSelectState,
                    "Vehicles",
                    "Search vehicle numbers...",
                    "vehicle-options",
                ),
                rx.cond(
                    BillFormState.form_error != "",
                    rx.text(BillFormState.form_error, class_name="form-error"),
                ),
                rx.button("Save bill", type="submit"),
                align="stretch",
                spacing="3",
            ),
            on_submit=BillFormState.handle_submit,
        ),
        rx.cond(
            BillFormState.submitted != "",
            rx.code_block(BillFormState.submitted, language="json"),
        ),
        class_name="card bill-card",
    )
