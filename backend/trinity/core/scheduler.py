"""Scheduler — (delay, action) abstraction driving the navigation phases.

Invariants:
    - Delays are milliseconds, relative to the scheduler's notion of "now"
    - Equal due times fire in insertion order
    - A cancelled handle never fires; cancelling twice is harmless
    - VirtualScheduler only moves time when told to (advance/run_all)

Design Decisions:
    - Protocol over ABC: the asyncio implementation lives in infrastructure/
      and core never imports it (ADR: ExMA dependency arrows point inward)
    - Heap of (due, seq) entries: actions scheduled by running actions inside
      the advance window still fire in the same advance call
"""

import heapq
import itertools
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

Action = Callable[[], None]


class TimerHandle(Protocol):
    """Returned by call_later; cancel() prevents a pending action from firing."""
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Contract used by NavigationController — implemented by core (virtual) and shell (asyncio)."""
    def call_later(self, delay_ms: float, action: Action) -> TimerHandle: ...


@dataclass
class VirtualTimer:
    due_ms: float
    action: Action
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class VirtualScheduler:
    """Deterministic scheduler for tests and offline simulation."""
    now_ms: float = 0.0
    _queue: list[tuple[float, int, VirtualTimer]] = field(default_factory=list)
    _seq: itertools.count = field(default_factory=itertools.count)

    def call_later(self, delay_ms: float, action: Action) -> VirtualTimer:
        timer = VirtualTimer(due_ms=self.now_ms + max(delay_ms, 0), action=action)
        heapq.heappush(self._queue, (timer.due_ms, next(self._seq), timer))
        return timer

    @property
    def pending(self) -> int:
        return sum(1 for _, _, t in self._queue if not t.cancelled)

    def advance(self, ms: float) -> int:
        """Move time forward by ms, firing everything due. Returns actions fired."""
        deadline = self.now_ms + ms
        fired = 0
        while self._queue and self._queue[0][0] <= deadline:
            due, _, timer = heapq.heappop(self._queue)
            self.now_ms = due
            if timer.cancelled:
                continue
            timer.action()
            fired += 1
        self.now_ms = deadline
        return fired

    def run_all(self) -> int:
        """Fire everything pending, however far in the future."""
        fired = 0
        while self._queue:
            due, _, timer = heapq.heappop(self._queue)
            self.now_ms = max(self.now_ms, due)
            if timer.cancelled:
                continue
            timer.action()
            fired += 1
        return fired
