from __future__ import annotations
"""Core domain models"""

from .agent import AgentRole, AgentStatus, Agent
from .message import (
    COLLABORATIVE_AGENT_ID,
    SYSTEM_AGENT_ID,
    Sender,
    Visibility,
    Attachment,
    Message,
)
from .project import ProjectStatus, ProjectPriority, ClientInfo, Project
from .metrics import ProjectMetrics

__all__ = [
    "AgentRole",
    "AgentStatus",
    "Agent",
    "COLLABORATIVE_AGENT_ID",
    "SYSTEM_AGENT_ID",
    "Sender",
    "Visibility",
    "Attachment",
    "Message",
    "ProjectStatus",
    "ProjectPriority",
    "ClientInfo",
    "Project",
    "ProjectMetrics",
]
