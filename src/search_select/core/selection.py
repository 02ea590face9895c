"""
Selection models for single- and multi-select search fields.

A selected value is not guaranteed to be among the loaded options: an edited
bill may reference a shop on page 7 of the results. Both models keep a
label memory so such a value is still displayed with its name, through a
synthesized singleton option, instead of as a blank selection.
"""

from typing import Iterable

from search_select.models.option import Option, OptionCollection


class _LabelMemory:
    """Labels seen for values, from loaded pages, lookups or initial records."""

    def __init__(self) -> None:
        self._labels: dict[str, str] = {}

    def remember(self, option: Option) -> None:
        self._labels[option.value] = option.label

    def remember_all(self, options: Iterable[Option]) -> None:
        for option in options:
            self.remember(option)

    def knows(self, value: str) -> bool:
        return value in self._labels

    def resolve(self, value: str, loaded: OptionCollection | None) -> Option:
        """Return the loaded option, else a synthesized one."""
        if loaded is not None:
            option = loaded.get(value)
            if option is not None:
                return option
        return Option(label=self._labels.get(value, value), value=value)


class SingleSelection:
    """Holds at most one selected value."""

    multiple = False

    def __init__(self, value: str | None = None, label: str | None = None) -> None:
        self._memory = _LabelMemory()
        self._value = value or None
        if self._value and label:
            self._memory.remember(Option(label=label, value=self._value))

    @property
    def value(self) -> str | None:
        return self._value

    @property
    def values(self) -> list[str]:
        return [self._value] if self._value else []

    def select(self, value: str | None, label: str | None = None) -> None:
        self._value = value or None
        if self._value and label:
            self._memory.remember(Option(label=label, value=self._value))

    def clear(self) -> None:
        self._value = None

    def remember(self, options: Iterable[Option]) -> None:
        self._memory.remember_all(options)

    def unresolved(self, loaded: OptionCollection) -> list[str]:
        """Selected values neither loaded nor labelled yet."""
        return [v for v in self.values if v not in loaded and not self._memory.knows(v)]

    def current(self, loaded: OptionCollection | None = None) -> Option | None:
        if not self._value:
            return None
        return self._memory.resolve(self._value, loaded)


class MultiSelection:
    """Holds an ordered set of selected values."""

    multiple = True

    def __init__(
        self,
        values: Iterable[str] = (),
        labels: dict[str, str] | None = None,
    ) -> None:
        self._memory = _LabelMemory()
        self._values: list[str] = []
        self.set_values(values)
        for value, label in (labels or {}).items():
            self._memory.remember(Option(label=label, value=value))

    @property
    def values(self) -> list[str]:
        return list(self._values)

    def set_values(self, values: Iterable[str]) -> None:
        self._values = []
        for value in values:
            if value and value not in self._values:
                self._values.append(value)

    def toggle(self, value: str, label: str | None = None) -> None:
        if value in self._values:
            self._values.remove(value)
            return
        self._values.append(value)
        if label:
            self._memory.remember(Option(label=label, value=value))

    def clear(self) -> None:
        self._values = []

    def remember(self, options: Iterable[Option]) -> None:
        self._memory.remember_all(options)

    def unresolved(self, loaded: OptionCollection) -> list[str]:
        return [v for v in self._values if v not in loaded and not self._memory.knows(v)]

    def current(self, loaded: OptionCollection | None = None) -> list[Option]:
        return [self._memory.resolve(v, loaded) for v in self._values]


Selection = SingleSelection | MultiSelection
