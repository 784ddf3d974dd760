"""
Pytest configuration and fixtures for pokecards tests.

The PokéAPI is replaced by an in-process backend served through
`httpx.MockTransport`; no test touches the network.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from core.config import AppSettings
from core.domain.models import DetailRecord, SummaryReference

BASE_URL = "https://pokeapi.test/api/v2"


def detail_url(pokemon_id: int) -> str:
    return f"{BASE_URL}/pokemon/{pokemon_id}/"


def detail_payload(pokemon_id: int, name: str, base_experience: int) -> dict[str, Any]:
    """A trimmed-down PokéAPI detail record (extra fields included on purpose)."""
    return {
        "id": pokemon_id,
        "name": name,
        "base_experience": base_experience,
        "height": 7,
        "weight": 69,
        "sprites": {
            "front_default": f"https://sprites.test/{pokemon_id}.png",
            "back_default": None,
        },
    }


@dataclass
class FakeBackend:
    """Deterministic PokéAPI stand-in.

    `listing` is the `results` array; `details` maps a detail URL to either a
    JSON payload or an HTTP status code to fail with.
    """

    listing: list[dict[str, str]] = field(default_factory=list)
    details: dict[str, Any] = field(default_factory=dict)
    listing_status: int = 200
    requests: list[httpx.Request] = field(default_factory=list)

    def add(self, pokemon_id: int, name: str, base_experience: int) -> None:
        url = detail_url(pokemon_id)
        self.listing.append({"name": name, "url": url})
        self.details[url] = detail_payload(pokemon_id, name, base_experience)

    def fail(self, pokemon_id: int, name: str, status: int = 500) -> None:
        url = detail_url(pokemon_id)
        self.listing.append({"name": name, "url": url})
        self.details[url] = status

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/api/v2/pokemon":
            if self.listing_status != 200:
                return httpx.Response(self.listing_status, json={"detail": "nope"})
            limit = int(request.url.params.get("limit", "20"))
            return httpx.Response(200, json={"count": 1302, "results": self.listing[:limit]})

        entry = self.details.get(str(request.url))
        if entry is None:
            return httpx.Response(404, text="Not Found")
        if isinstance(entry, int):
            return httpx.Response(entry, text="boom")
        return httpx.Response(200, json=entry)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def listing_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/api/v2/pokemon"]


class InMemorySource:
    """EntitySource without HTTP; per-name delays control completion order."""

    def __init__(
        self,
        references: list[SummaryReference],
        *,
        delays: dict[str, float] | None = None,
        failures: dict[str, Exception] | None = None,
    ) -> None:
        self.references = references
        self.delays = delays or {}
        self.failures = failures or {}
        self.started: list[str] = []
        self.completed: list[str] = []
        self.cancelled: list[str] = []

    async def list_references(self, limit: int) -> list[SummaryReference]:
        return self.references[:limit]

    async def fetch_detail(self, reference: SummaryReference) -> DetailRecord:
        self.started.append(reference.name)
        try:
            await asyncio.sleep(self.delays.get(reference.name, 0))
        except asyncio.CancelledError:
            self.cancelled.append(reference.name)
            raise
        if reference.name in self.failures:
            raise self.failures[reference.name]
        self.completed.append(reference.name)
        return DetailRecord(id=len(self.completed), name=reference.name, base_experience=1)


def run(coro):
    """Run an async coroutine synchronously (no pytest-asyncio needed)."""
    return asyncio.run(coro)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(api_base_url=BASE_URL, _env_file=None)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()
