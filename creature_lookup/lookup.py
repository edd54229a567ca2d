"""Entry points used by presentation layers: lookup, browse and search."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from .api_adapter import catalog_entry_from_payload, normalize_creature
from .catalog import CatalogCache, filter_catalog
from .clients import CreatureAPIClient, CreatureNotFoundError
from .models import CatalogEntry, CreatureRecord


class CreatureLookupService:
    """Central access point tying the API client, catalog cache and filter together."""

    def __init__(
        self,
        client: Optional[CreatureAPIClient] = None,
        cache: Optional[CatalogCache] = None,
    ) -> None:
        self.client = client or CreatureAPIClient()
        self.cache = cache or CatalogCache(client=self.client)
        self._browsed_source: Optional[List[Any]] = None
        self._browsed: List[CatalogEntry] = []

    def lookup(self, query: str) -> CreatureRecord:
        payload = self.client.fetch_entity(query)
        if payload is None:
            raise CreatureNotFoundError("A creature name or id is required.")
        return normalize_creature(payload)

    def browse_all(self) -> List[CatalogEntry]:
        raw_entries = self.cache.ensure_loaded()
        if raw_entries is not self._browsed_source:
            self._browsed = [catalog_entry_from_payload(entry) for entry in raw_entries]
            self._browsed_source = raw_entries
        return self._browsed

    def search_catalog(self, query: str) -> Sequence[CatalogEntry]:
        return filter_catalog(self._browsed, query)
