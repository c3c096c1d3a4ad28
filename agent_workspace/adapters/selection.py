from __future__ import annotations
"""Selection adapters - random reply choice, and a scripted one for tests and demos"""

import random
from typing import Optional, Sequence, TypeVar

from ..core.ports.selection import SelectionPort

T = TypeVar("T")


class RandomSelection(SelectionPort):
    """Uniform random choice; pass a seed for reproducible sessions"""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def choose(self, options: Sequence[T]) -> T:
        if not options:
            raise ValueError("Cannot choose from an empty sequence")
        return self._random.choice(list(options))

    def randint(self, low: int, high: int) -> int:
        return self._random.randint(low, high)


class SequenceSelection(SelectionPort):
    """
    Replays a fixed list of indices, cycling when exhausted.

    `choose` uses the next index modulo the number of options; `randint`
    returns `low + index`, clamped to `high`.
    """

    def __init__(self, indices: Sequence[int] = (0,)):
        if not indices:
            raise ValueError("SequenceSelection needs at least one index")
        self._indices = list(indices)
        self._position = 0

    def _next(self) -> int:
        value = self._indices[self._position % len(self._indices)]
        self._position += 1
        return value

    def choose(self, options: Sequence[T]) -> T:
        if not options:
            raise ValueError("Cannot choose from an empty sequence")
        return options[self._next() % len(options)]

    def randint(self, low: int, high: int) -> int:
        return min(low + self._next(), high)
