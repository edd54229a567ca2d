"""Tests for the lookup service entry points."""

import pytest

from conftest import BASE_URL, FakeResponse
from creature_lookup.clients import CreatureNotFoundError
from creature_lookup.lookup import CreatureLookupService
from creature_lookup.models import CatalogEntry

CATALOG = [
    {"id": 1, "name": "Pyrolynx", "stats": []},
    {"id": 7, "name": "Embera"},
    {"id": "12", "name": "Quillfin"},
]


@pytest.fixture
def service(client):
    return CreatureLookupService(client=client)


class TestLookup:
    def test_plural_fallback_returns_normalized_record(self, service, session):
        session.routes[f"{BASE_URL}/creature/embera"] = FakeResponse(500, None)
        session.routes[f"{BASE_URL}/creatures/embera"] = FakeResponse(200, {"name": "Embera", "id": 7})
        record = service.lookup("Embera")
        assert record.name == "Embera"
        assert record.id == 7
        assert record.types == []
        assert record.special is None

    def test_both_endpoints_failing_raises_not_found(self, service):
        with pytest.raises(CreatureNotFoundError):
            service.lookup("ghost")

    def test_blank_query_raises_not_found(self, service, session):
        with pytest.raises(CreatureNotFoundError):
            service.lookup("  ")
        assert session.calls == []


class TestBrowse:
    def test_second_browse_is_served_from_cache(self, service, session):
        session.routes[f"{BASE_URL}/creature"] = FakeResponse(200, CATALOG)
        first = service.browse_all()
        # Any further network call would now fail.
        session.routes.clear()
        second = service.browse_all()
        assert first == second
        assert first == [
            CatalogEntry(id=1, name="Pyrolynx"),
            CatalogEntry(id=7, name="Embera"),
            CatalogEntry(id=12, name="Quillfin"),
        ]
        assert session.calls == [f"{BASE_URL}/creature"]

    def test_total_failure_returns_empty_list(self, service, session):
        assert service.browse_all() == []
        assert service.cache.loaded
        assert len(session.calls) == 2

    def test_invalidate_refetches(self, service, session):
        session.routes[f"{BASE_URL}/creatures"] = FakeResponse(200, CATALOG[:1])
        assert len(service.browse_all()) == 1
        session.routes[f"{BASE_URL}/creatures"] = FakeResponse(200, CATALOG)
        service.cache.invalidate()
        assert len(service.browse_all()) == 3


class TestSearchCatalog:
    def test_before_browse_is_empty(self, service):
        assert service.search_catalog("embera") == []

    def test_filters_last_browsed_list(self, service, session):
        session.routes[f"{BASE_URL}/creature"] = FakeResponse(200, CATALOG)
        browsed = service.browse_all()
        assert service.search_catalog("") is browsed
        assert service.search_catalog("EMB") == [CatalogEntry(id=7, name="Embera")]
        assert service.search_catalog("1") == [CatalogEntry(id=1, name="Pyrolynx"), CatalogEntry(id=12, name="Quillfin")]
