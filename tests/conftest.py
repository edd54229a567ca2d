"""Shared fakes for exercising the creature API client without a network."""

from __future__ import annotations

from typing import Any, Dict, List, Union

import pytest
import requests

from creature_lookup.clients import CreatureAPIClient

BASE_URL = "https://creatures.test/api"

_INVALID_JSON = object()


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None) -> None:
        self.status_code = status_code
        self._payload = payload

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if self._payload is _INVALID_JSON:
            raise ValueError("Expecting value")
        return self._payload


class FakeSession:
    """Maps URLs to responses or exceptions and records every GET."""

    def __init__(self, routes: Dict[str, Union[FakeResponse, Exception]] | None = None) -> None:
        self.routes = dict(routes or {})
        self.calls: List[str] = []

    def get(self, url: str, headers: Any = None, timeout: Any = None) -> FakeResponse:
        self.calls.append(url)
        outcome = self.routes.get(url)
        if outcome is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def invalid_json():
    return _INVALID_JSON


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> CreatureAPIClient:
    return CreatureAPIClient(base_url=BASE_URL, session=session, timeout=1.0)
