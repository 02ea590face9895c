"""
Bill record assembled from the bill form and its pickers.
"""

from typing import Any

BILL_TYPES = ("fuel", "general")


def build_bill(
    form_data: dict,
    shop: list[str],
    category: list[str],
    vehicles: list[str],
) -> dict[str, Any]:
    """
    Return the bill record a form submit sends to the backend.

    Single-select pickers report their value as a one-item list; an empty
    list becomes an empty string so required-field checks can test it.
    """
    try:
        amount = float(form_data.get("amount") or 0)
    except (TypeError, ValueError):
        amount = 0.0
    bill_type = form_data.get("billType") or BILL_TYPES[0]
    return {
        "billType": bill_type if bill_type in BILL_TYPES else BILL_TYPES[0],
        "description": (form_data.get("description") or "").strip(),
        "amount": amount,
        "shop": shop[0] if shop else "",
        "category": category[0] if category else "",
        "vehicles": list(vehicles),
    }
