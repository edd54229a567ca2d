"""Creature catalog API client with ordered endpoint fallback."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)


class CreatureAPIError(RuntimeError):
    """Base error for the creature API client."""


class CreatureNotFoundError(CreatureAPIError):
    """Raised when no candidate endpoint returned the requested creature."""


@dataclass(frozen=True)
class AttemptOutcome:
    """Result of a single endpoint attempt: a payload on success, a reason on failure."""

    url: str
    payload: Any = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None


class CreatureAPIClient:
    """Minimal wrapper around the RPG creature API.

    The service exposes the same resources under both singular and plural
    paths, depending on deployment, so every request walks the candidates in
    order and stops at the first usable response. Override the origin with
    CREATURE_API_BASE_URL or the base_url constructor arg.
    """

    BASE_URL = "https://rpg-creature-api.freecodecamp.rocks/api"
    RESOURCE_PATHS = ("creature", "creatures")
    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        base = base_url or os.getenv("CREATURE_API_BASE_URL") or self.BASE_URL
        self.base_url = base.rstrip("/")
        self.session = session or requests.Session()
        if timeout is None:
            timeout = float(os.getenv("CREATURE_API_TIMEOUT", str(self.DEFAULT_TIMEOUT)))
        self.timeout = timeout

    def entity_urls(self, query: str) -> List[str]:
        encoded = quote(query, safe="")
        return [f"{self.base_url}/{path}/{encoded}" for path in self.RESOURCE_PATHS]

    def catalog_urls(self) -> List[str]:
        return [f"{self.base_url}/{path}" for path in self.RESOURCE_PATHS]

    def attempt(self, url: str, expected: type) -> AttemptOutcome:
        """GET ``url`` once; never raises for network, status or body problems."""
        try:
            response = self.session.get(url, headers={"Accept": "application/json"}, timeout=self.timeout)
        except requests.RequestException as exc:
            return AttemptOutcome(url=url, reason=f"network error: {exc}")

        if not response.ok:
            return AttemptOutcome(url=url, reason=f"status {response.status_code}")

        try:
            payload = response.json()
        except ValueError:
            return AttemptOutcome(url=url, reason="body is not valid JSON")

        if not isinstance(payload, expected):
            return AttemptOutcome(url=url, reason=f"expected a JSON {expected.__name__}, got {type(payload).__name__}")

        return AttemptOutcome(url=url, payload=payload)

    def first_success(self, urls: List[str], expected: type) -> Optional[AttemptOutcome]:
        for url in urls:
            outcome = self.attempt(url, expected)
            if outcome.ok:
                return outcome
            logger.debug("Creature API attempt failed for %s: %s", url, outcome.reason)
        return None

    def fetch_entity(self, query: str) -> Optional[Dict[str, Any]]:
        """Fetch one creature by name or id.

        Returns ``None`` for a blank query. Raises CreatureNotFoundError when
        every candidate endpoint fails.
        """
        normalized = str(query).strip().lower()
        if not normalized:
            return None

        outcome = self.first_success(self.entity_urls(normalized), dict)
        if outcome is None:
            raise CreatureNotFoundError(f"Creature '{normalized}' was not found.")
        return outcome.payload

    def fetch_catalog(self) -> List[Any]:
        """Fetch the whole catalog; an unreachable service yields an empty list."""
        outcome = self.first_success(self.catalog_urls(), list)
        if outcome is None:
            logger.warning("Every creature catalog endpoint failed; using an empty catalog")
            return []
        return outcome.payload
