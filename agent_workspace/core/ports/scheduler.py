from __future__ import annotations
"""Scheduler Port - interface for deferred actions (the simulated thinking delay)"""

from abc import ABC, abstractmethod
from typing import Callable


class SchedulerPort(ABC):
    """
    Port for running a callback after a delay.
    Implementations can use an asyncio event loop, a virtual clock, or run inline.

    Scheduled callbacks cannot be cancelled: once accepted, a callback always runs.
    """

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        """
        Run `callback` once, `delay` seconds from now.

        Args:
            delay: Seconds to wait (0 = as soon as possible)
            callback: Zero-argument callable
        """
        pass
