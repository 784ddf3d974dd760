"""List loading orchestration.

One load cycle is: fetch the listing, sort a copy of it by name, fetch every
detail concurrently behind a barrier, then commit the whole collection or
fall into the error state. The CLI and the HTML exporter only ever read the
resulting `SessionState`; nothing here prints or renders.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from core.domain.collation import sort_by_name
from core.domain.models import DetailRecord, SessionState
from core.interfaces.source import EntitySource
from core.services.concurrency import gather_all_or_fail

logger = logging.getLogger(__name__)


def describe_failure(exc: BaseException) -> str:
    message = str(exc).strip()
    return message or exc.__class__.__name__


async def load_entities(*, source: EntitySource, limit: int) -> list[DetailRecord]:
    """Fetch, sort and enrich one batch. Raises on the first failure."""

    references = await source.list_references(limit)
    logger.info("Listing returned %d references", len(references))

    ordered = sort_by_name(references, name=lambda ref: ref.name)
    return await gather_all_or_fail(source.fetch_detail(ref) for ref in ordered)


async def run_load_cycle(*, source: EntitySource, limit: int) -> SessionState:
    """Run one full load cycle and return the committed state.

    Every failure (listing, any detail, transport or payload) is caught here
    and turned into the error state; partial results are discarded.
    """

    logger.debug("Starting load cycle (limit=%d)", limit)
    try:
        entities = await load_entities(source=source, limit=limit)
    except Exception as exc:
        logger.warning("Load cycle failed: %s", describe_failure(exc))
        return SessionState.failed(describe_failure(exc))

    logger.info("Load cycle committed %d entities", len(entities))
    return SessionState.loaded(entities)


@dataclass
class DisplaySession:
    """Session state for one display activation.

    `activate` performs exactly one load cycle; later calls return the state
    of that cycle without fetching again. A new activation means a new
    `DisplaySession`.
    """

    source: EntitySource
    limit: int = 48
    state: SessionState = field(default_factory=SessionState.pending)
    _activated: bool = field(default=False, init=False, repr=False)

    @property
    def activated(self) -> bool:
        return self._activated

    async def activate(self) -> SessionState:
        if self._activated:
            return self.state
        self._activated = True
        self.state = await run_load_cycle(source=self.source, limit=self.limit)
        return self.state
