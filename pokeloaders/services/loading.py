"""The two ways a loader can hand data to its page: awaited now, or pending."""
import asyncio
from typing import Any, Awaitable


async def load_all(*awaitables: Awaitable[Any]) -> list[Any]:
    """Runs the awaitables concurrently and returns their results in order.

    The first failure is raised to the caller and the calls still in flight
    are cancelled; there are no partial results.
    """
    tasks = [asyncio.ensure_future(aw) for aw in awaitables]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        raise


def defer(awaitable: Awaitable[Any]) -> asyncio.Future:
    """Schedules the awaitable immediately and returns the pending result.

    The caller awaits it later, or cancels it if nobody is waiting any more.
    """
    return asyncio.ensure_future(awaitable)
