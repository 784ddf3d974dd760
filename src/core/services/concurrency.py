"""Fan-out/fan-in helpers.

`asyncio.gather` leaves sibling tasks running when one fails; the load cycle
needs the stricter "all or nothing" behaviour, so it is spelled out here.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Iterable, TypeVar

T = TypeVar("T")


async def gather_all_or_fail(awaitables: Iterable[Awaitable[T]]) -> list[T]:
    """Run every awaitable concurrently and wait for all of them.

    Results are returned positionally (input order, not completion order).
    When any task fails, the still-pending siblings are cancelled and awaited,
    and the failure is re-raised. If several tasks failed in the same wakeup,
    the one earliest in input order wins.
    """

    tasks = [asyncio.ensure_future(aw) for aw in awaitables]
    if not tasks:
        return []

    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    failed = [
        task
        for task in tasks
        if task in done and (task.cancelled() or task.exception() is not None)
    ]
    if failed:
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        # Re-raises the stored exception.
        failed[0].result()

    return [task.result() for task in tasks]
