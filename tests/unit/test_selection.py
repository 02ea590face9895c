"""Unit tests for the selection models."""

from search_select.core.selection import MultiSelection, SingleSelection
from search_select.models import Option, OptionCollection

LOADED = OptionCollection([Option("Acme", "s1"), Option("Blue Line", "s2")])


class TestSingleSelection:
    def test_current_uses_loaded_option(self):
        selection = SingleSelection("s2")
        assert selection.current(LOADED) == Option("Blue Line", "s2")

    def test_value_outside_window_uses_known_label(self):
        selection = SingleSelection("s99", label="Zenith Traders")
        assert selection.current(LOADED) == Option("Zenith Traders", "s99")
        assert selection.unresolved(LOADED) == []

    def test_unknown_value_is_synthesized_from_value(self):
        selection = SingleSelection("s99")
        assert selection.current(LOADED) == Option("s99", "s99")
        assert selection.unresolved(LOADED) == ["s99"]

    def test_label_survives_leaving_the_window(self):
        selection = SingleSelection()
        selection.remember(LOADED)
        selection.select("s1")
        assert selection.current(OptionCollection()) == Option("Acme", "s1")

    def test_select_none_clears(self):
        selection = SingleSelection("s1")
        selection.select(None)
        assert selection.current(LOADED) is None
        assert selection.values == []


class TestMultiSelection:
    def test_toggle_adds_and_removes(self):
        selection = MultiSelection()
        selection.toggle("s1")
        selection.toggle("s2")
        selection.toggle("s1")
        assert selection.values == ["s2"]

    def test_current_keeps_selection_order(self):
        selection = MultiSelection(["s2", "v7", "s1"], labels={"v7": "DXB 10259"})
        assert selection.current(LOADED) == [
            Option("Blue Line", "s2"),
            Option("DXB 10259", "v7"),
            Option("Acme", "s1"),
        ]

    def test_set_values_drops_duplicates_and_blanks(self):
        selection = MultiSelection()
        selection.set_values(["v1", "", "v1", "v2"])
        assert selection.values == ["v1", "v2"]

    def test_unresolved(self):
        selection = MultiSelection(["s1", "v9"])
        assert selection.unresolved(LOADED) == ["v9"]

    def test_clear(self):
        selection = MultiSelection(["s1"])
        selection.clear()
        assert selection.current(LOADED) == []
