from __future__ import annotations
"""Project domain models - the engagement a workspace conversation belongs to"""

from dataclasses import dataclass, field
from enum import Enum


class ProjectStatus(str, Enum):
    """High-level state of the project"""
    ACTIVE = "active"
    PLANNING = "planning"
    ON_HOLD = "on-hold"
    COMPLETED = "completed"

    @property
    def emoji(self) -> str:
        emojis = {
            ProjectStatus.ACTIVE: "🚀",
            ProjectStatus.PLANNING: "📐",
            ProjectStatus.ON_HOLD: "⏸️",
            ProjectStatus.COMPLETED: "✅",
        }
        return emojis[self]


class ProjectPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class ClientInfo:
    """The client a project is delivered for"""
    name: str = ""
    industry: str = ""


@dataclass(frozen=True)
class Project:
    """
    Project metadata supplied by the host.
    The dispatch engine only reads it to format system messages.
    """
    id: str
    name: str
    client: ClientInfo = field(default_factory=ClientInfo)
    status: ProjectStatus = ProjectStatus.ACTIVE
    progress: int = 0
    start_date: str = ""
    end_date: str = ""
    team_size: int = 0
    description: str = ""
    priority: ProjectPriority = ProjectPriority.MEDIUM
    budget: str = ""
    last_activity: str = ""

    @property
    def headline(self) -> str:
        """One-line status summary for headers"""
        return f"{self.status.emoji} {self.name} ({self.status.value}, {self.progress}%)"
