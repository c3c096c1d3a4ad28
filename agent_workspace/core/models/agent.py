"""Agent domain models - the simulated team members a workspace routes messages to"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List


class AgentRole(str, Enum):
    """The discipline of an agent in the project team"""
    PROJECT_MANAGER = "project_manager"          # Timelines, milestones
    BUSINESS_ANALYST = "business_analyst"        # Requirements, user stories
    DATA_ANALYST = "data_analyst"                # KPIs, aggregations
    STRATEGY_CONSULTANT = "strategy_consultant"  # Market, strategy
    PMO_ANALYST = "pmo_analyst"                  # Governance, reporting
    GENERALIST = "generalist"                    # Anything not listed above

    @property
    def display_name(self) -> str:
        names = {
            AgentRole.PROJECT_MANAGER: "Project Manager",
            AgentRole.BUSINESS_ANALYST: "Business Analyst",
            AgentRole.DATA_ANALYST: "Data Analyst",
            AgentRole.STRATEGY_CONSULTANT: "Strategy Consultant",
            AgentRole.PMO_ANALYST: "PMO Analyst",
            AgentRole.GENERALIST: "Generalist",
        }
        return names[self]

    @classmethod
    def from_label(cls, label: str) -> "AgentRole":
        """Map a free-text role label ("Project Manager", "data_analyst") to a role"""
        normalized = label.strip().lower().replace("-", " ").replace("_", " ")
        for role in cls:
            if normalized in (role.display_name.lower(), role.value.replace("_", " ")):
                return role
        return cls.GENERALIST


class AgentStatus(str, Enum):
    """Current availability of an agent"""
    ACTIVE = "active"        # 🟢 Available and responsive
    IDLE = "idle"            # 🔵 Available, nothing recent
    THINKING = "thinking"    # 🟡 Preparing a reply
    OFFLINE = "offline"      # 🔴 Disabled by the host

    @property
    def emoji(self) -> str:
        emojis = {
            AgentStatus.ACTIVE: "🟢",
            AgentStatus.IDLE: "🔵",
            AgentStatus.THINKING: "🟡",
            AgentStatus.OFFLINE: "🔴",
        }
        return emojis[self]


@dataclass
class Agent:
    """
    A member of the project's AI team.

    Descriptive metadata comes from the host roster and is never changed by
    the dispatch engine; only `status` and `last_activity` move.
    """
    id: str
    name: str
    role: AgentRole = AgentRole.GENERALIST
    status: AgentStatus = AgentStatus.IDLE

    # Free-text label from the roster, shown when the role has no display name of its own
    role_title: str = ""

    # Descriptive metadata
    avatar: str = ""
    description: str = ""
    capabilities: List[str] = field(default_factory=list)
    response_time: str = ""
    success_rate: float = 0.0
    is_configurable: bool = True

    last_activity: str = ""

    @property
    def role_label(self) -> str:
        """Role as shown to the user"""
        return self.role_title or self.role.display_name

    @property
    def is_active(self) -> bool:
        return self.status == AgentStatus.ACTIVE

    def update_status(self, status: AgentStatus, activity: Optional[str] = None) -> None:
        """Move the agent to a new status, optionally stamping last activity"""
        self.status = status
        if activity is not None:
            self.last_activity = activity

    def copy(self) -> "Agent":
        """Working copy for a session; the roster entry stays untouched"""
        return Agent(
            id=self.id,
            name=self.name,
            role=self.role,
            status=self.status,
            role_title=self.role_title,
            avatar=self.avatar,
            description=self.description,
            capabilities=list(self.capabilities),
            response_time=self.response_time,
            success_rate=self.success_rate,
            is_configurable=self.is_configurable,
            last_activity=self.last_activity,
        )
