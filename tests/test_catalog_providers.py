"""Tests for the catalog providers and the per-day catalog cache."""

import asyncio
from datetime import timedelta

import pytest

from daily_guess.errors import CatalogAuthenticationError, CatalogUnavailable
from daily_guess.services.catalog_providers import (
    CatalogProvider,
    HumaCatalogProvider,
    MockCatalogProvider,
)
from daily_guess.services.catalog_service import CatalogService

from conftest import DAY


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self.payload = payload
        self.ok = status_code < 400
        self.reason = "OK" if self.ok else "Error"

    def json(self):
        return self.payload


class NonJsonResponse(FakeResponse):
    def json(self):
        raise ValueError("Expecting value: line 1 column 1 (char 0)")


class FakeHttp:
    """Serves canned responses keyed by URL path and offset."""

    def __init__(self, pages, details):
        self.pages = pages
        self.details = details
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append((url, params, headers))
        if params is not None:
            return self.pages[params["offset"]]
        user_id = url.rsplit("/", 1)[-1]
        return self.details[user_id]


def _detail(user_id, name):
    return FakeResponse(payload={"id": user_id, "preferredName": {"value": name}})


class TestHumaCatalogProvider:
    def test_pages_and_filters_inactive(self):
        http = FakeHttp(
            pages={
                0: FakeResponse(payload={"total": 3, "items": [
                    {"id": "a"}, {"id": "b", "status": {"active": False}},
                ]}),
                2: FakeResponse(payload={"total": 3, "items": [{"id": "c"}]}),
            },
            details={"a": _detail("a", "Anna"), "c": _detail("c", "Carl")},
        )
        provider = HumaCatalogProvider("https://hr.example.com/", "Bearer secret", page_size=2, http=http)
        employees = provider.list_entities(DAY)
        assert [employee.name for employee in employees] == ["Anna", "Carl"]
        assert http.calls[0][0] == "https://hr.example.com/users"
        assert http.calls[0][2]["Authorization"] == "Bearer secret"

    def test_failed_detail_is_skipped(self):
        http = FakeHttp(
            pages={0: FakeResponse(payload={"total": 2, "items": [{"id": "a"}, {"id": "b"}]})},
            details={"a": _detail("a", "Anna"), "b": FakeResponse(status_code=404)},
        )
        provider = HumaCatalogProvider("https://hr.example.com", "secret", page_size=50, http=http)
        assert [employee.id for employee in provider.list_entities(DAY)] == ["a"]

    def test_unauthorized_raises(self):
        http = FakeHttp(pages={0: FakeResponse(status_code=401)}, details={})
        provider = HumaCatalogProvider("https://hr.example.com", "expired", http=http)
        with pytest.raises(CatalogAuthenticationError):
            provider.list_entities(DAY)

    def test_failed_list_page_raises(self):
        http = FakeHttp(pages={0: FakeResponse(status_code=500)}, details={})
        provider = HumaCatalogProvider("https://hr.example.com", "secret", http=http)
        with pytest.raises(CatalogUnavailable):
            provider.list_entities(DAY)

    def test_non_json_list_page_raises(self):
        http = FakeHttp(pages={0: NonJsonResponse()}, details={})
        provider = HumaCatalogProvider("https://hr.example.com", "secret", http=http)
        with pytest.raises(CatalogUnavailable):
            provider.list_entities(DAY)

    def test_malformed_list_item_raises(self):
        page = {"total": 1, "items": [{"id": "a", "teams": [{"id": "t1"}]}]}
        http = FakeHttp(pages={0: FakeResponse(payload=page)}, details={})
        provider = HumaCatalogProvider("https://hr.example.com", "secret", http=http)
        with pytest.raises(CatalogUnavailable):
            provider.list_entities(DAY)

    def test_missing_token(self):
        with pytest.raises(CatalogAuthenticationError):
            HumaCatalogProvider("https://hr.example.com", "")


class TestMockCatalogProvider:
    def test_bundled_roster_loads(self):
        employees = MockCatalogProvider().list_entities(DAY)
        assert len(employees) > 10
        assert len({employee.id for employee in employees}) == len(employees)


class CountingProvider(CatalogProvider):
    def __init__(self, employees):
        self.employees = employees
        self.calls = 0

    def list_entities(self, day):
        self.calls += 1
        return list(self.employees)


class TestCatalogService:
    def test_caches_per_day(self, employees):
        provider = CountingProvider(employees)
        service = CatalogService(provider)

        async def scenario():
            first = await service.get_catalog(DAY)
            second = await service.get_catalog(DAY)
            await service.get_catalog(DAY + timedelta(days=1))
            return first, second

        first, second = asyncio.run(scenario())
        assert first is second
        assert provider.calls == 2

    def test_refresh_refetches(self, employees):
        provider = CountingProvider(employees)
        service = CatalogService(provider)

        async def scenario():
            await service.get_catalog(DAY)
            await service.refresh(DAY)

        asyncio.run(scenario())
        assert provider.calls == 2
