# -*- coding: utf-8 -*-
"""
Per-event task management for webhook batches
"""
import asyncio
from typing import Any, List, Set

from loguru import logger

from relaybot.context import BotContext
from relaybot.handlers import handle_event

# In-flight event tasks, kept so shutdown can wait for them
_active_tasks: Set[asyncio.Task] = set()


def get_active_tasks_count() -> int:
    """Get the number of currently running event tasks"""
    return len(_active_tasks)


async def process_event_batch(ctx: BotContext, events: List[Any]) -> List[Any]:
    """
    Handle every event of one webhook delivery as an independent task and join on all of them.

    A failing task does not affect the others; it is logged and reported as None.
    Only an exception raised by the join itself propagates to the caller.

    Returns:
        One result per event, in delivery order
    """
    if not events:
        return []

    tasks = [asyncio.create_task(handle_event(ctx, event)) for event in events]
    _active_tasks.update(tasks)
    logger.debug(f"Started {len(tasks)} event tasks (Active tasks: {len(_active_tasks)})")

    try:
        results = await asyncio.gather(*tasks, return_exceptions=True)
    finally:
        _active_tasks.difference_update(tasks)

    settled = []
    for event, result in zip(events, results):
        if isinstance(result, BaseException):
            kind = event.get("type", "unknown") if isinstance(event, dict) else "unknown"
            logger.opt(exception=result).error(f"Error in {kind} event handler: {result}")
            result = None
        settled.append(result)

    return settled


async def wait_for_all_tasks(timeout: float = 30.0) -> bool:
    """Let in-flight event tasks settle before shutdown. False if some outlived the timeout."""
    if not _active_tasks:
        return True

    logger.info(f"Draining {len(_active_tasks)} event tasks before shutdown")
    _, pending = await asyncio.wait(set(_active_tasks), timeout=timeout)
    if pending:
        logger.warning(f"{len(pending)} event tasks still running after {timeout}s")
    return not pending
