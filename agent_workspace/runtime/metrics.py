from __future__ import annotations
"""Metrics Aggregator - usage counters and dashboard snapshots for a workspace"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional

from ..core.models import Agent, AgentStatus, Message, Project, ProjectMetrics


@dataclass
class AgentStatusRow:
    """Status row for dashboard display"""
    agent_id: str
    name: str
    role: str
    status: AgentStatus
    status_emoji: str
    last_activity: str
    response_time: str
    success_rate: float


@dataclass
class DashboardData:
    """Complete dashboard snapshot"""
    project_name: str
    project_status: str
    project_progress: int

    agents: list[AgentStatusRow]
    recent_messages: list[Message]
    metrics: ProjectMetrics

    thinking: int
    pending_dispatches: int


class MetricsAggregator:
    """
    Owns the workspace metrics.

    `active_agents` is recomputed from whatever agent snapshot the caller
    passes in; `total_queries` grows by one per dispatched message.
    """

    def __init__(self, initial: Optional[ProjectMetrics] = None):
        self._defaults = replace(initial) if initial else ProjectMetrics()
        self._metrics = replace(self._defaults)

    @property
    def metrics(self) -> ProjectMetrics:
        return self._metrics.snapshot()

    def recompute(self, agents: Iterable[Agent]) -> ProjectMetrics:
        """Set `active_agents` from the given agents' statuses"""
        self._metrics.active_agents = sum(1 for a in agents if a.status == AgentStatus.ACTIVE)
        return self.metrics

    def record_query(self) -> None:
        """Count one dispatched message, whatever its number of targets"""
        self._metrics.total_queries += 1

    def reset_for_project(self, agents: Iterable[Agent]) -> ProjectMetrics:
        """Fresh counters for a newly selected project"""
        self._metrics = ProjectMetrics(
            active_agents=0,
            total_queries=0,
            success_rate=self._defaults.success_rate,
            avg_response_time=self._defaults.avg_response_time,
            tasks_generated=0,
            documents_created=0,
        )
        return self.recompute(agents)

    def get_dashboard_data(
        self,
        project: Project,
        agents: list[Agent],
        recent_messages: list[Message],
        pending_dispatches: int = 0,
    ) -> DashboardData:
        """Generate dashboard snapshot"""
        rows = [
            AgentStatusRow(
                agent_id=agent.id,
                name=agent.name,
                role=agent.role_label,
                status=agent.status,
                status_emoji=agent.status.emoji,
                last_activity=agent.last_activity or "-",
                response_time=agent.response_time or "-",
                success_rate=agent.success_rate,
            )
            for agent in agents
        ]

        return DashboardData(
            project_name=project.name,
            project_status=project.status.value,
            project_progress=project.progress,
            agents=rows,
            recent_messages=recent_messages,
            metrics=self.metrics,
            thinking=len([r for r in rows if r.status == AgentStatus.THINKING]),
            pending_dispatches=pending_dispatches,
        )

    def get_summary(self, agents: list[Agent]) -> str:
        """Get a concise text summary"""
        active = [a for a in agents if a.status == AgentStatus.ACTIVE]
        thinking = [a for a in agents if a.status == AgentStatus.THINKING]
        idle = [a for a in agents if a.status == AgentStatus.IDLE]
        offline = [a for a in agents if a.status == AgentStatus.OFFLINE]

        lines = [
            f"📊 Status: {len(active)} active, {len(thinking)} thinking, "
            f"{len(idle)} idle, {len(offline)} offline",
            f"💬 Queries: {self._metrics.total_queries}  |  "
            f"Success: {self._metrics.success_rate:.1f}%  |  "
            f"Avg response: {self._metrics.avg_response_time}",
        ]

        if thinking:
            lines.append("🟡 Thinking:")
            for a in thinking:
                lines.append(f"  • {a.name} ({a.role_label})")

        return "\n".join(lines)
