"""Tests for reply synthesis"""
from __future__ import annotations

from agent_workspace.adapters.selection import SequenceSelection
from agent_workspace.core.models import (
    Agent, AgentRole, ClientInfo, Project, ProjectStatus, Sender,
    COLLABORATIVE_AGENT_ID, SYSTEM_AGENT_ID,
)
from agent_workspace.runtime.responses import (
    COLLABORATIVE_INSIGHTS, COLLABORATIVE_RESPONSES, ROLE_RESPONSES,
    ResponseSynthesizer, contextual_additions,
)


def _alex() -> Agent:
    return Agent(id="pm-001", name="Alex", role=AgentRole.PROJECT_MANAGER)


class TestAgentReply:
    """Test single-agent replies"""

    def test_reply_uses_role_table(self):
        synthesizer = ResponseSynthesizer(SequenceSelection([0]))
        reply = synthesizer.synthesize_agent_reply(_alex(), "What's next?")

        assert reply.content == (
            "**Alex (Project Manager)**: " + ROLE_RESPONSES[AgentRole.PROJECT_MANAGER][0]
        )
        assert reply.sender == Sender.AGENT
        assert reply.agent_id == "pm-001"
        assert reply.can_convert_to_task
        assert reply.can_convert_to_document

    def test_selection_picks_candidate(self):
        synthesizer = ResponseSynthesizer(SequenceSelection([2]))
        reply = synthesizer.synthesize_agent_reply(_alex(), "What's next?")
        assert reply.content.endswith(ROLE_RESPONSES[AgentRole.PROJECT_MANAGER][2])

    def test_avatar_in_speaker(self):
        agent = Agent(id="da-001", name="Marcus", role=AgentRole.DATA_ANALYST, avatar="📊")
        reply = ResponseSynthesizer(SequenceSelection()).synthesize_agent_reply(agent, "hi")
        assert reply.content.startswith("**📊 Marcus (Data Analyst)**: ")

    def test_unknown_role_uses_generalist_reply(self):
        agent = Agent(id="x-001", name="Merlin", role=AgentRole.GENERALIST, role_title="Chief Wizard")
        reply = ResponseSynthesizer(SequenceSelection()).synthesize_agent_reply(agent, "hi")
        assert reply.content == (
            "**Merlin (Chief Wizard)**: " + ROLE_RESPONSES[AgentRole.GENERALIST][0]
        )

    def test_contextual_additions_appended(self):
        synthesizer = ResponseSynthesizer(SequenceSelection([0]))
        reply = synthesizer.synthesize_agent_reply(_alex(), "What is the budget risk?")
        assert reply.content.endswith(
            "\n\n💰 Budget impact will be assessed • ⚠️ Risk analysis included"
        )


class TestCollaborativeReply:
    """Test the whole-team reply"""

    def test_opener_and_insights(self):
        synthesizer = ResponseSynthesizer(SequenceSelection([0]))
        reply = synthesizer.synthesize_collaborative_reply("How are we doing?")

        # randint(2, 3) -> 2 with index 0
        assert reply.content == (
            COLLABORATIVE_RESPONSES[0] + COLLABORATIVE_INSIGHTS[0] + COLLABORATIVE_INSIGHTS[1]
        )
        assert reply.agent_id == COLLABORATIVE_AGENT_ID
        assert reply.can_convert_to_task and reply.can_convert_to_document

    def test_three_insights(self):
        synthesizer = ResponseSynthesizer(SequenceSelection([1]))
        reply = synthesizer.synthesize_collaborative_reply("hello")
        assert reply.content == COLLABORATIVE_RESPONSES[1] + "".join(COLLABORATIVE_INSIGHTS[:3])

    def test_keyword_notes_left_to_single_agents(self):
        synthesizer = ResponseSynthesizer(SequenceSelection([0]))
        reply = synthesizer.synthesize_collaborative_reply("Is the timeline and budget at risk?")
        assert reply.content == (
            COLLABORATIVE_RESPONSES[0] + COLLABORATIVE_INSIGHTS[0] + COLLABORATIVE_INSIGHTS[1]
        )


class TestContextualAdditions:
    """Test keyword notes"""

    def test_keywords_case_insensitive(self):
        assert contextual_additions("URGENT: check the Schedule") == [
            "⏰ Timeline consideration noted",
            "🔥 Priority flag raised",
        ]

    def test_no_keywords(self):
        assert contextual_additions("hello team") == []


class TestSystemMessages:
    """Test welcome, switch and team messages"""

    project = Project(
        id="proj-003",
        name="Operational Excellence Program",
        client=ClientInfo(name="ManufacturingPro Ltd", industry="Manufacturing"),
        status=ProjectStatus.ACTIVE,
        progress=80,
        team_size=6,
        budget="€320,000",
    )

    def test_welcome_lists_team(self):
        agents = [_alex(), Agent(id="ba-001", name="Sarah", role=AgentRole.BUSINESS_ANALYST, description="Requirements")]
        message = ResponseSynthesizer(SequenceSelection()).welcome_message(self.project, agents)

        assert message.agent_id == SYSTEM_AGENT_ID
        assert "Operational Excellence Program" in message.content
        assert "ManufacturingPro Ltd" in message.content
        assert "team of 2 AI agents" in message.content
        assert "• Sarah (Business Analyst) - Requirements" in message.content
        assert not message.can_convert_to_task
        assert not message.can_convert_to_document

    def test_switch_message(self):
        message = ResponseSynthesizer(SequenceSelection()).project_switch_message(self.project)
        assert message.content.startswith("Switched to project: Operational Excellence Program")
        assert "Status: active" in message.content
        assert "Progress: 80%" in message.content
        assert "Budget: €320,000" in message.content
        assert "Team Size: 6" in message.content
        assert message.is_system

    def test_team_update_message(self):
        message = ResponseSynthesizer(SequenceSelection()).team_update_message(self.project, [_alex()])
        assert "• Alex (Project Manager)" in message.content
        assert "1-agent team" in message.content
        assert not message.can_convert_to_task
