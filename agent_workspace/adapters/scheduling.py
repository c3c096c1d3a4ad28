from __future__ import annotations
"""Scheduler adapters - asyncio timer for production, virtual clocks for tests"""

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..core.ports.scheduler import SchedulerPort


class AsyncioScheduler(SchedulerPort):
    """
    Runs deferred callbacks on an asyncio event loop via `loop.call_later`.
    Must be used from code running on that loop.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        self.loop.call_later(max(delay, 0.0), callback)


class ImmediateScheduler(SchedulerPort):
    """Runs every callback inline, ignoring the delay"""

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        callback()


@dataclass(order=True)
class _ScheduledCall:
    """Wrapper for heap ordering: (due, sequence, callback)"""
    due: float
    sequence: int
    callback: Callable[[], None] = field(compare=False)


class ManualScheduler(SchedulerPort):
    """
    Virtual clock. Nothing runs until the owner advances time.

    Callbacks fire in due-time order; ties keep scheduling order.
    """

    def __init__(self):
        self.now = 0.0
        self._queue: list[_ScheduledCall] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        heapq.heappush(
            self._queue,
            _ScheduledCall(self.now + max(delay, 0.0), next(self._counter), callback),
        )

    @property
    def pending(self) -> int:
        return len(self._queue)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every callback that falls due. Returns how many ran."""
        target = self.now + seconds
        ran = 0
        while self._queue and self._queue[0].due <= target:
            call = heapq.heappop(self._queue)
            self.now = call.due
            call.callback()
            ran += 1
        self.now = target
        return ran

    def run_all(self) -> int:
        """Run everything scheduled, including callbacks scheduled while draining"""
        ran = 0
        while self._queue:
            call = heapq.heappop(self._queue)
            self.now = max(self.now, call.due)
            call.callback()
            ran += 1
        return ran
