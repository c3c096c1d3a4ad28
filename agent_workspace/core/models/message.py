from __future__ import annotations
"""Message domain models - the entries of a project conversation"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

# Reserved agent ids for replies that do not come from a single agent
COLLABORATIVE_AGENT_ID = "collaborative"
SYSTEM_AGENT_ID = "system"


def new_message_id(kind: str) -> str:
    return f"{kind}-{uuid4().hex[:12]}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Sender(str, Enum):
    """Who wrote a message"""
    USER = "user"
    AGENT = "agent"


class Visibility(str, Enum):
    """Intended audience of a message, interpreted by the rendering layer only"""
    PROJECT = "project"
    TEAM = "team"
    PRIVATE = "private"

    @property
    def label(self) -> str:
        labels = {
            Visibility.PROJECT: "👥 Project",
            Visibility.TEAM: "🤝 Team",
            Visibility.PRIVATE: "🔒 Private",
        }
        return labels[self]


@dataclass(frozen=True)
class Attachment:
    """A file attached to a user message"""
    name: str
    type: str = "application/octet-stream"
    size: int = 0
    url: Optional[str] = None
    id: str = field(default_factory=lambda: new_message_id("att"))


@dataclass(frozen=True)
class Message:
    """
    One entry of the conversation.

    Messages are immutable; the conversation only ever grows, except for the
    wholesale reset on project switch.
    """
    content: str
    sender: Sender = Sender.USER
    agent_id: Optional[str] = None
    id: str = field(default_factory=lambda: new_message_id("msg"))
    timestamp: datetime = field(default_factory=_utcnow)

    # Set on user messages only
    mentions: tuple[str, ...] = ()
    attachments: tuple[Attachment, ...] = ()

    visibility: Visibility = Visibility.PROJECT

    # Whether the UI may promote the message into a task or a document
    can_convert_to_task: bool = False
    can_convert_to_document: bool = False

    @property
    def is_system(self) -> bool:
        return self.agent_id == SYSTEM_AGENT_ID

    @property
    def is_collaborative(self) -> bool:
        return self.agent_id == COLLABORATIVE_AGENT_ID
