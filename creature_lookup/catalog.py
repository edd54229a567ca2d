"""In-memory creature catalog cache and client-side filtering."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, List, Mapping, Optional, Sequence, TypeVar

from .api_adapter import coerce_text
from .clients import CreatureAPIClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CatalogCache:
    """Process-lifetime cache of the full catalog, filled on first demand.

    ``loaded`` separates "not fetched yet" from "fetched and empty". The lock
    doubles as the in-flight marker: a caller arriving mid-fetch waits and
    reuses the result instead of issuing a second request.
    """

    def __init__(
        self,
        client: Optional[CreatureAPIClient] = None,
        fetch: Optional[Callable[[], List[Any]]] = None,
    ) -> None:
        if fetch is None:
            fetch = (client or CreatureAPIClient()).fetch_catalog
        self._fetch = fetch
        self._lock = threading.Lock()
        self._loaded = False
        self._entries: List[Any] = []

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def entries(self) -> List[Any]:
        return self._entries

    def ensure_loaded(self) -> List[Any]:
        if self._loaded:
            return self._entries

        with self._lock:
            if not self._loaded:
                entries = list(self._fetch())
                self._entries = entries
                self._loaded = True
                logger.info("Creature catalog loaded with %d entries", len(entries))
        return self._entries

    def invalidate(self) -> None:
        with self._lock:
            self._loaded = False
            self._entries = []
        logger.info("Creature catalog cache invalidated")


def _entry_field(entry: Any, key: str) -> Any:
    if isinstance(entry, Mapping):
        return entry.get(key)
    return getattr(entry, key, None)


def filter_catalog(entries: Sequence[T], query: str) -> Sequence[T]:
    """Case-insensitive substring match on name or id; blank query returns ``entries`` as-is."""
    token = str(query or "").strip().lower()
    if not token:
        return entries

    matches: List[T] = []
    for entry in entries:
        name = coerce_text(_entry_field(entry, "name")).lower()
        id_text = coerce_text(_entry_field(entry, "id"))
        if token in name or token in id_text:
            matches.append(entry)
    return matches
