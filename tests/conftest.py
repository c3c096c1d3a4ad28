"""Shared fixtures for workspace tests"""
from __future__ import annotations

import pytest

from agent_workspace.adapters.scheduling import ManualScheduler
from agent_workspace.adapters.selection import SequenceSelection
from agent_workspace.core.models import (
    Agent, AgentRole, AgentStatus, ClientInfo, Project, ProjectMetrics, ProjectStatus,
)
from agent_workspace.core.ports.notifications import NotificationPort
from agent_workspace.runtime.session import WorkspaceSession


class RecordingNotifier(NotificationPort):
    def __init__(self):
        self.notifications: list[tuple[str, str]] = []

    def notify(self, text: str, severity: str = "information") -> None:
        self.notifications.append((text, severity))


def make_agent(
    agent_id: str,
    name: str,
    role: AgentRole = AgentRole.PROJECT_MANAGER,
    status: AgentStatus = AgentStatus.ACTIVE,
) -> Agent:
    return Agent(id=agent_id, name=name, role=role, status=status)


@pytest.fixture
def roster() -> list[Agent]:
    return [
        make_agent("a1", "Alex", AgentRole.PROJECT_MANAGER, AgentStatus.ACTIVE),
        make_agent("a2", "Sarah", AgentRole.BUSINESS_ANALYST, AgentStatus.IDLE),
        make_agent("a3", "Marcus", AgentRole.DATA_ANALYST, AgentStatus.ACTIVE),
    ]


@pytest.fixture
def project() -> Project:
    return Project(
        id="proj-001",
        name="Digital Transformation Initiative",
        client=ClientInfo(name="TechCorp Solutions", industry="Technology"),
        status=ProjectStatus.ACTIVE,
        progress=65,
    )


@pytest.fixture
def other_project() -> Project:
    return Project(
        id="proj-002",
        name="Market Expansion Analysis",
        client=ClientInfo(name="GlobalRetail Inc", industry="Retail"),
        status=ProjectStatus.PLANNING,
        progress=40,
    )


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def session(project, roster, scheduler, notifier) -> WorkspaceSession:
    return WorkspaceSession(
        project=project,
        roster=roster,
        scheduler=scheduler,
        selection=SequenceSelection([0]),
        notifier=notifier,
        initial_metrics=ProjectMetrics(total_queries=10, success_rate=94.2),
    )


@pytest.fixture
def strict_session(project, roster, scheduler, notifier) -> WorkspaceSession:
    return WorkspaceSession(
        project=project,
        roster=roster,
        scheduler=scheduler,
        selection=SequenceSelection([0]),
        notifier=notifier,
        strict=True,
    )
