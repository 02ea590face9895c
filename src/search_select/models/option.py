"""
Option models: the ``{label, value}`` pairs shown in a search-select list.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True, slots=True)
class Option:
    """A display label paired with a stable identifier."""

    label: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"label": self.label, "value": self.value}


class OptionCollection:
    """
    Ordered, value-unique options for the current search term.

    Replaced wholesale when the term changes and extended when another page
    of the same term arrives. Overlapping rows between pages are dropped so
    a value is never listed twice.
    """

    def __init__(self, options: Iterable[Option] = ()) -> None:
        self._options: list[Option] = []
        self._values: set[str] = set()
        self.extend(options)

    def replace(self, options: Iterable[Option]) -> None:
        """Discard the current options and load a new first page."""
        self._options = []
        self._values = set()
        self.extend(options)

    def extend(self, options: Iterable[Option]) -> int:
        """
        Append options in received order, skipping known values.

        Returns:
            Number of options actually appended.
        """
        added = 0
        for option in options:
            if option.value in self._values:
                continue
            self._values.add(option.value)
            self._options.append(option)
            added += 1
        return added

    def get(self, value: str) -> Option | None:
        """Return the loaded option with the given value, if any."""
        if value not in self._values:
            return None
        return next(o for o in self._options if o.value == value)

    def values(self) -> list[str]:
        return [o.value for o in self._options]

    def to_list(self) -> list[dict[str, str]]:
        return [o.to_dict() for o in self._options]

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __iter__(self) -> Iterator[Option]:
        return iter(list(self._options))

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return f"OptionCollection({self._options!r})"
