"""PokéAPI source.

Two endpoints are used:
- `GET <base>/pokemon?limit=N` for the listing (`results: [{name, url}]`).
- `GET <url>` for each listed entry's detail record.

Every failure (transport, HTTP status, undecodable JSON, malformed listing) is
raised as `SourceError`. Missing card fields are not failures: they are
reported through `adapters.record_validation`.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client, describe_http_error
from adapters.record_validation import report_card_shape
from core.config import AppSettings
from core.domain.models import DetailRecord, ListingPage, SummaryReference
from core.errors import SourceError
from core.interfaces.source import EntitySource


class PokeApiSource(EntitySource):
    """Fetches summary references and detail records over HTTP."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        settings: AppSettings | None = None,
        *,
        on_diagnostic: Callable[[str], None] | None = None,
    ) -> None:
        self._client = client
        self._settings = settings or AppSettings()
        self._on_diagnostic = on_diagnostic

    async def _get_json(self, url: str, *, params: dict[str, Any] | None = None) -> Any:
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise SourceError(describe_http_error(exc), url=url) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise SourceError(f"Invalid JSON response from {url}", url=url) from exc

    async def list_references(self, limit: int) -> list[SummaryReference]:
        url = self._settings.listing_url
        payload = await self._get_json(url, params={"limit": limit})
        try:
            page = ListingPage.model_validate(payload)
        except ValidationError as exc:
            raise SourceError(f"Unexpected listing payload from {url}", url=url) from exc
        return page.results

    async def fetch_detail(self, reference: SummaryReference) -> DetailRecord:
        payload = await self._get_json(reference.url)

        diagnostics = report_card_shape(payload, source=reference.url)
        if self._on_diagnostic:
            for message in diagnostics:
                self._on_diagnostic(f"{reference.name}: {message}")

        try:
            return DetailRecord.model_validate(payload)
        except ValidationError as exc:
            raise SourceError(
                f"Unexpected detail payload for {reference.name}",
                url=reference.url,
            ) from exc


@asynccontextmanager
async def open_pokeapi_source(
    settings: AppSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    on_diagnostic: Callable[[str], None] | None = None,
) -> AsyncIterator[PokeApiSource]:
    """Yield a source backed by one client; the client closes on exit."""

    async with build_async_client(settings, transport=transport) as client:
        yield PokeApiSource(client, settings, on_diagnostic=on_diagnostic)
