"""Asyncio Scheduler — wall-clock Scheduler over the running event loop.

Invariants:
    - Delays given in milliseconds, converted to loop seconds
    - Must be used from inside a running loop (FastAPI request/lifespan context)
    - Actions run on the loop thread; the single-writer model of
      NavigationController holds because the loop is single-threaded

Design Decisions:
    - loop.call_later over asyncio tasks + sleep: returns a cancellable
      asyncio.TimerHandle that already satisfies core's TimerHandle protocol
    - Failures inside an action are logged here: the loop would otherwise only
      report them through its default exception handler
"""

import asyncio
import logging
from collections.abc import Callable

from trinity.core.errors import SchedulerError

logger = logging.getLogger(__name__)


class AsyncioScheduler:
    """Scheduler backed by asyncio.AbstractEventLoop.call_later."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError as e:
            raise SchedulerError("no running event loop") from e

    def call_later(
        self, delay_ms: float, action: Callable[[], None],
    ) -> asyncio.TimerHandle:
        return self._get_loop().call_later(
            max(delay_ms, 0) / 1000, self._run, action,
        )

    @staticmethod
    def _run(action: Callable[[], None]) -> None:
        try:
            action()
        except Exception:
            logger.exception("Scheduled navigation action failed")
