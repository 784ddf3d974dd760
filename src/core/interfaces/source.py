"""Contract for entity sources.

Why Protocol:
- A structural contract (duck typing) without rigid inheritance.
- The loader depends on this abstraction, so the HTTP adapter can be swapped
  for an in-memory fake in tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import DetailRecord, SummaryReference


@runtime_checkable
class EntitySource(Protocol):
    """Minimal contract for a two-stage (list, then detail) source.

    Design rules:
    - Both methods are async because they perform I/O.
    - Failures are raised, never returned; the loader decides what they mean.
    """

    async def list_references(self, limit: int) -> list[SummaryReference]:
        """Return up to `limit` summary references, in source order."""

        ...

    async def fetch_detail(self, reference: SummaryReference) -> DetailRecord:
        """Resolve one reference into its detail record."""

        ...
