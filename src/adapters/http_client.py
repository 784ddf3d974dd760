"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts and headers for every request of a load cycle.
- Eases testing: tests pass an `httpx.MockTransport` instead of the network.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Build an `httpx.AsyncClient` with safe defaults.

    Why a builder:
    - Centralizes timeouts/headers so listing and detail fetches behave alike.
    - No retries: a failed request fails the load cycle.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def describe_http_error(exc: httpx.HTTPError) -> str:
    """Short, display-friendly message for a failed request."""

    if isinstance(exc, httpx.HTTPStatusError):
        return f"Request failed with status code {exc.response.status_code}"
    if isinstance(exc, httpx.TimeoutException):
        return "Request timed out"
    text = str(exc).strip()
    return text or "Network Error"
