"""Supervised fire-and-forget task scope."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any

from mailupselling.upselling_logging.service_logging import get_logger

logger = get_logger(__name__)


class SupervisedScope:
    """Launch background coroutines whose failures never reach the caller.

    Each task is held by a strong reference until it finishes. A failing task
    is logged and dropped; siblings keep running.
    """

    def __init__(self, name: str = "default") -> None:
        self.name = name
        self._tasks: set[asyncio.Task[Any]] = set()

    def launch(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        """Schedule ``coro`` on the running loop and return its task."""
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "supervised_task_failed",
                action="supervised_task_failed",
                scope=self.name,
                error=str(exc),
                error_type=type(exc).__name__,
            )

    @property
    def active(self) -> int:
        return len(self._tasks)

    async def join(self) -> None:
        """Wait for every outstanding task, ignoring their failures."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)


__all__ = ["SupervisedScope"]
