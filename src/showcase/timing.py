"""Async timing helpers."""

import asyncio


async def delay(ms: float) -> None:
    """Suspend the current task for at least ``ms`` milliseconds.

    Non-positive durations yield to the event loop once and return.
    """
    await asyncio.sleep(max(ms, 0) / 1000)
