"""
Option projectors: map raw backend records to ``Option`` pairs.

Each searchable entity supplies its own projector, e.g. shops project
``{label: shopName, value: _id}``. Projection is pure and does no I/O.
"""

from typing import Any, Callable, Iterable, Mapping

from benedict import benedict

from search_select.lib import logs
from search_select.models.option import Option
from search_select.models.pagination import RawRecord

LOG = logs.logger(__file__)

Projector = Callable[[RawRecord], Option | None]


class FieldProjector:
    """
    Projects a record by reading one label key and one value key.

    Keys may be dotted paths into nested records (``"owner.name"``), read
    through benedict so missing levels yield the default instead of
    raising KeyError.

    Attributes:
        label_key: Key (or dotted path) of the display text.
        value_key: Key (or dotted path) of the stable identifier.
    """

    def __init__(self, label_key: str, value_key: str = "_id") -> None:
        self.label_key = label_key
        self.value_key = value_key

    def __call__(self, record: RawRecord) -> Option | None:
        value = _read(record, self.value_key)
        if value is None or value == "":
            LOG.debug("Skipping record without %s: %s", self.value_key, record)
            return None
        label = _read(record, self.label_key)
        return Option(
            label=str(label) if label not in (None, "") else str(value),
            value=str(value),
        )

    def __repr__(self) -> str:
        return f"FieldProjector({self.label_key!r}, {self.value_key!r})"


def project(records: Iterable[RawRecord], projector: Projector) -> list[Option]:
    """
    Map raw records to options, preserving order.

    Records the projector rejects (returns None for) are left out.
    """
    options = []
    for record in records:
        option = projector(record)
        if option is not None:
            options.append(option)
    return options


def _read(record: Mapping[str, Any], key: str) -> Any:
    if "." not in key:
        return record.get(key)
    return benedict(dict(record), keypath_separator=".").get(key)
