from __future__ import annotations
"""Selection Port - interface for the randomness used to vary replies"""

from abc import ABC, abstractmethod
from typing import Sequence, TypeVar

T = TypeVar("T")


class SelectionPort(ABC):
    """
    Port for picking among reply candidates.
    Production uses a random source; tests supply a fixed sequence.
    """

    @abstractmethod
    def choose(self, options: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence"""
        pass

    @abstractmethod
    def randint(self, low: int, high: int) -> int:
        """Pick an integer in [low, high]"""
        pass
