"""Unit tests for the demo record source and the source factory."""

import pytest

from search_select import config
from search_select.config import Settings
from search_select.data.demo_records import DEMO_RECORDS
from search_select.errors import UnknownEntityError
from search_select.models import build_bill
from search_select.services import DemoRecordSource, HttpRecordSource, get_record_source


class TestDemoRecordSource:
    @pytest.mark.asyncio
    async def test_pages_do_not_overlap(self):
        source = DemoRecordSource("shop")
        first = await source.fetch_page("", 1, 30)
        second = await source.fetch_page("", 2, 30)

        ids = [r["_id"] for r in first.items] + [r["_id"] for r in second.items]
        assert len(ids) == len(set(ids)) == 60
        assert first.pagination.total == len(DEMO_RECORDS["shop"])
        assert first.has_more

    @pytest.mark.asyncio
    async def test_filter_is_case_insensitive(self):
        source = DemoRecordSource("shop")
        page = await source.fetch_page("ACME", 1, 30)
        assert page.items
        assert all("acme" in r["shopName"].lower() for r in page.items)
        assert page.items[0]["_id"] == "s1"

    @pytest.mark.asyncio
    async def test_identifier_is_not_searched(self):
        records = [{"_id": "acme-1", "shopName": "Blue Line"}]
        page = await DemoRecordSource("shop", records=records).fetch_page("acme", 1, 30)
        assert page.items == ()
        assert not page.has_more

    @pytest.mark.asyncio
    async def test_last_page(self):
        source = DemoRecordSource("category")
        page = await source.fetch_page("", 2, 10)
        assert len(page.items) == 2
        assert not page.has_more

    @pytest.mark.asyncio
    async def test_fetch_one(self):
        source = DemoRecordSource("vehicle")
        assert (await source.fetch_one("v60"))["vehicleNumber"] == "RAK 12183"
        assert await source.fetch_one("v999") is None

    def test_unknown_entity(self):
        with pytest.raises(UnknownEntityError):
            DemoRecordSource("spaceship")


class TestGetRecordSource:
    def test_demo_source_is_cached(self):
        source = get_record_source("category", "demo")
        assert isinstance(source, DemoRecordSource)
        assert get_record_source("category", "demo") is source

    def test_http_source_uses_entity_resource(self):
        source = get_record_source("vehicle", "http")
        assert isinstance(source, HttpRecordSource)
        assert (source.resource, source.resource_key) == ("vehicle", "vehicles")

    def test_unknown_kind(self):
        with pytest.raises(UnknownEntityError):
            get_record_source("shop", "graphql")


def test_settings_from_env_uses_module_values():
    settings = Settings.from_env()
    assert settings.page_size == max(config.PAGE_SIZE, 1)
    assert settings.debounce_seconds == settings.debounce_ms / 1000.0
    assert Settings().page_size == 30
    assert Settings().debounce_seconds == 0.5


class TestBuildBill:
    def test_collects_selections(self):
        bill = build_bill(
            {"billType": "general", "description": " Cement ", "amount": "120.5"},
            shop=["s87"],
            category=["c9"],
            vehicles=["v3", "v60"],
        )
        assert bill == {
            "billType": "general",
            "description": "Cement",
            "amount": 120.5,
            "shop": "s87",
            "category": "c9",
            "vehicles": ["v3", "v60"],
        }

    def test_empty_selections_and_bad_amount(self):
        bill = build_bill({"amount": "abc", "billType": "lease"}, shop=[], category=[], vehicles=[])
        assert bill["shop"] == ""
        assert bill["category"] == ""
        assert bill["amount"] == 0.0
        assert bill["billType"] == "fuel"


class TestSourceSettings:
    def test_http_source_uses_settings(self):
        settings = Settings(api_url="http://erp.test/v2", http_timeout=2.5)
        source = get_record_source("shop", "http", settings=settings)
        assert str(source._client.base_url) == "http://erp.test/v2/"
        assert source._client.timeout.read == 2.5

    def test_demo_source_uses_settings_latency(self):
        source = get_record_source("user", "demo", settings=Settings(demo_latency_ms=250))
        assert source.latency == 0.25

    def test_kind_defaults_to_settings(self):
        source = get_record_source("category", settings=Settings(source_kind="http"))
        assert isinstance(source, HttpRecordSource)
