"""Demo records for the shop, category, vehicle and user pickers."""

_SHOP_NAMES = [
    "Acme Building Supplies",
    "Al Noor Hardware",
    "Blue Line Electricals",
    "Capital Paints",
    "Desert Timber Trading",
    "Emirates Plumbing Centre",
    "Falcon Tools",
    "Gulf Cement Depot",
    "Horizon Glass & Aluminium",
    "Ideal Tiles",
    "Jebel Steel Works",
    "Khalifa Safety Equipment",
    "Lulu Hypermarket",
    "Marina Fuel Station",
    "National Cables",
]

_CATEGORY_NAMES = [
    "Electrical",
    "Plumbing",
    "Civil Works",
    "Painting",
    "Carpentry",
    "HVAC",
    "Safety",
    "Tools",
    "Fuel",
    "Office Supplies",
    "Transport",
    "Food & Refreshments",
]

_EMIRATES = ["DXB", "AUH", "SHJ", "AJM", "RAK"]

_USER_NAMES = [
    "Ahmed Khan",
    "Priya Nair",
    "Omar Haddad",
    "Joseph Mathew",
    "Fatima Zahra",
    "Ravi Kumar",
    "Sara Ali",
]


def _shops() -> list[dict]:
    # Branches multiply the base names into a list long enough to paginate
    shops = []
    for branch in range(6):
        for name in _SHOP_NAMES:
            index = len(shops)
            shops.append(
                {
                    "_id": f"s{index + 1}",
                    "shopName": name if branch == 0 else f"{name} - Branch {branch + 1}",
                    "location": _EMIRATES[index % len(_EMIRATES)],
                }
            )
    return shops


def _categories() -> list[dict]:
    return [
        {"_id": f"c{index + 1}", "name": name}
        for index, name in enumerate(_CATEGORY_NAMES)
    ]


def _vehicles() -> list[dict]:
    return [
        {
            "_id": f"v{index + 1}",
            "vehicleNumber": f"{_EMIRATES[index % len(_EMIRATES)]} {10000 + index * 37}",
            "vehicleType": "Pickup" if index % 3 else "Van",
        }
        for index in range(75)
    ]


def _users() -> list[dict]:
    return [
        {"_id": f"u{index + 1}", "name": name, "role": "engineer" if index % 2 else "driver"}
        for index, name in enumerate(_USER_NAMES)
    ]


DEMO_RECORDS: dict[str, list[dict]] = {
    "shop": _shops(),
    "category": _categories(),
    "vehicle": _vehicles(),
    "user": _users(),
}
