from __future__ import annotations
"""Conversation Store - append-only message log of a workspace session"""

from typing import Iterable, Iterator

from ..core.models import Message


class ConversationStore:
    """
    Ordered sequence of messages.

    Messages are only ever added at the tail. `reset` replaces the whole
    sequence with a single message and is reserved for project switches.
    """

    def __init__(self, initial: Iterable[Message] = ()):
        self._messages: list[Message] = list(initial)

    def append(self, message: Message) -> None:
        """Add a message at the tail"""
        self._messages.append(message)

    def extend(self, messages: Iterable[Message]) -> None:
        """Add several messages at the tail, keeping their order"""
        self._messages.extend(messages)

    def reset(self, message: Message) -> None:
        """Replace the conversation with a single message"""
        self._messages = [message]

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of the conversation"""
        return tuple(self._messages)

    def recent(self, limit: int = 10) -> list[Message]:
        return self._messages[-limit:]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))
