"""Unit tests for option projection and the entity registry."""

import pytest

from search_select.core.projector import FieldProjector, project
from search_select.entities import ENTITIES, get_entity
from search_select.errors import UnknownEntityError
from search_select.models import Option


def test_projects_shop():
    projector = FieldProjector("shopName")
    assert projector({"_id": "s1", "shopName": "Acme"}) == Option("Acme", "s1")


def test_numeric_ids_become_strings():
    projector = FieldProjector("name", "id")
    assert projector({"id": 42, "name": "Tools"}) == Option("Tools", "42")


def test_dotted_label_path():
    projector = FieldProjector("owner.name")
    record = {"_id": "u1", "owner": {"name": "Priya Nair"}}
    assert projector(record) == Option("Priya Nair", "u1")


def test_missing_label_falls_back_to_value():
    assert FieldProjector("shopName")({"_id": "s9"}) == Option("s9", "s9")


def test_records_without_id_are_skipped():
    records = [{"shopName": "Ghost"}, {"_id": "s1", "shopName": "Acme"}]
    assert project(records, FieldProjector("shopName")) == [Option("Acme", "s1")]


def test_project_keeps_order():
    records = [{"_id": f"s{i}", "shopName": f"Shop {i}"} for i in range(5)]
    values = [o.value for o in project(records, FieldProjector("shopName"))]
    assert values == ["s0", "s1", "s2", "s3", "s4"]


def test_entities_project_their_fields():
    assert get_entity("vehicle").projector({"_id": "v1", "vehicleNumber": "DXB 1"}) == Option(
        "DXB 1", "v1"
    )
    assert get_entity("Category").projector({"_id": "c1", "name": "Fuel"}) == Option("Fuel", "c1")
    assert get_entity("vehicle").multiple
    assert not get_entity("shop").multiple
    assert set(ENTITIES) == {"shop", "category", "vehicle", "user"}


def test_unknown_entity():
    with pytest.raises(UnknownEntityError):
        get_entity("spaceship")
