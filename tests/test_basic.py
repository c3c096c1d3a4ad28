"""Basic tests for the workspace domain models"""
from __future__ import annotations

import dataclasses

import pytest

from agent_workspace.core.models import (
    Agent, AgentRole, AgentStatus, Message, Sender, Visibility, Attachment,
    Project, ProjectStatus, ProjectMetrics,
    COLLABORATIVE_AGENT_ID, SYSTEM_AGENT_ID,
)


class TestAgentModels:
    """Test agent-related models"""

    def test_agent_role_display_names(self):
        assert AgentRole.PROJECT_MANAGER.display_name == "Project Manager"
        assert AgentRole.BUSINESS_ANALYST.display_name == "Business Analyst"
        assert AgentRole.DATA_ANALYST.display_name == "Data Analyst"
        assert AgentRole.STRATEGY_CONSULTANT.display_name == "Strategy Consultant"
        assert AgentRole.PMO_ANALYST.display_name == "PMO Analyst"

    def test_agent_role_from_label(self):
        assert AgentRole.from_label("Project Manager") == AgentRole.PROJECT_MANAGER
        assert AgentRole.from_label("  pmo analyst ") == AgentRole.PMO_ANALYST
        assert AgentRole.from_label("data_analyst") == AgentRole.DATA_ANALYST
        assert AgentRole.from_label("Strategy-Consultant") == AgentRole.STRATEGY_CONSULTANT

    def test_unknown_role_label_falls_back(self):
        assert AgentRole.from_label("Chief Wizard") == AgentRole.GENERALIST
        assert AgentRole.from_label("") == AgentRole.GENERALIST

    def test_agent_status_emojis(self):
        assert AgentStatus.ACTIVE.emoji == "🟢"
        assert AgentStatus.IDLE.emoji == "🔵"
        assert AgentStatus.THINKING.emoji == "🟡"
        assert AgentStatus.OFFLINE.emoji == "🔴"

    def test_role_label_prefers_roster_title(self):
        plain = Agent(id="x", name="X", role=AgentRole.DATA_ANALYST)
        titled = Agent(id="y", name="Y", role=AgentRole.GENERALIST, role_title="Chief Wizard")
        assert plain.role_label == "Data Analyst"
        assert titled.role_label == "Chief Wizard"

    def test_agent_status_update(self):
        agent = Agent(id="a1", name="Alex")
        assert agent.status == AgentStatus.IDLE

        agent.update_status(AgentStatus.THINKING)
        assert agent.status == AgentStatus.THINKING
        assert agent.last_activity == ""

        agent.update_status(AgentStatus.ACTIVE, "just now")
        assert agent.is_active
        assert agent.last_activity == "just now"

    def test_agent_copy_is_independent(self):
        agent = Agent(id="a1", name="Alex", capabilities=["Planning"])
        clone = agent.copy()
        clone.status = AgentStatus.OFFLINE
        clone.capabilities.append("Budgeting")

        assert agent.status == AgentStatus.IDLE
        assert agent.capabilities == ["Planning"]


class TestMessageModels:
    """Test message-related models"""

    def test_message_defaults(self):
        message = Message(content="Hello")
        assert message.sender == Sender.USER
        assert message.visibility == Visibility.PROJECT
        assert message.mentions == ()
        assert message.attachments == ()
        assert not message.can_convert_to_task
        assert not message.can_convert_to_document
        assert message.id.startswith("msg-")

    def test_message_is_immutable(self):
        message = Message(content="Hello")
        with pytest.raises(dataclasses.FrozenInstanceError):
            message.content = "Changed"

    def test_message_ids_are_unique(self):
        assert Message(content="a").id != Message(content="a").id

    def test_reserved_markers(self):
        system = Message(content="hi", sender=Sender.AGENT, agent_id=SYSTEM_AGENT_ID)
        team = Message(content="hi", sender=Sender.AGENT, agent_id=COLLABORATIVE_AGENT_ID)
        assert system.is_system and not system.is_collaborative
        assert team.is_collaborative and not team.is_system

    def test_visibility_labels(self):
        assert Visibility.PROJECT.label == "👥 Project"
        assert Visibility.TEAM.label == "🤝 Team"
        assert Visibility("private").label == "🔒 Private"

    def test_attachment_defaults(self):
        attachment = Attachment(name="report.csv", type="text/csv", size=2048)
        assert attachment.id.startswith("att-")
        assert attachment.url is None


class TestProjectModels:
    """Test project-related models"""

    def test_project_headline(self):
        project = Project(id="p1", name="Pilot", status=ProjectStatus.PLANNING, progress=15)
        assert project.headline == "📐 Pilot (planning, 15%)"

    def test_project_status_values(self):
        assert ProjectStatus("on-hold") == ProjectStatus.ON_HOLD

    def test_metrics_snapshot_is_detached(self):
        metrics = ProjectMetrics(total_queries=5)
        snapshot = metrics.snapshot()
        snapshot.total_queries = 99
        assert metrics.total_queries == 5


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
