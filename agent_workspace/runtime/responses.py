from __future__ import annotations
"""Response Synthesizer - templated agent replies and workspace system messages"""

from typing import Iterable

from ..core.models import (
    Agent, AgentRole, Message, Project, Sender, Visibility,
    COLLABORATIVE_AGENT_ID, SYSTEM_AGENT_ID,
)
from ..core.ports.selection import SelectionPort

# Every role has an entry; GENERALIST is the fallback for unrecognised roster labels
ROLE_RESPONSES: dict[AgentRole, list[str]] = {
    AgentRole.PROJECT_MANAGER: [
        "From a project management perspective, I recommend focusing on the next milestone. Let me break down the timeline for you.",
        "I can update the project schedule and create actionable tasks if you confirm the approach.",
        "Based on current velocity, we should adjust our sprint goals. I'll create a revised timeline.",
        "I've identified 3 critical path items that need attention. Shall I prioritize them?",
    ],
    AgentRole.BUSINESS_ANALYST: [
        "I've captured this requirement. Let me translate it into structured user stories with acceptance criteria.",
        "From a business perspective, this aligns with our value proposition. Here's how we can document it:",
        "Suggested acceptance criteria: [Given-When-Then format]. Should I create the full specification?",
        "This requirement impacts 3 existing features. I recommend a dependency analysis before proceeding.",
    ],
    AgentRole.DATA_ANALYST: [
        "I can run a quick aggregation on the provided dataset and return actionable insights.",
        "Preliminary analysis shows: the KPI increased by 12% month-over-month. Let me create a detailed report.",
        "I've identified 3 data patterns that warrant investigation. Shall I deep-dive into each?",
        "Based on historical trends, I project a 15% improvement if we implement this change. Here's the data:",
    ],
    AgentRole.STRATEGY_CONSULTANT: [
        "Market trend analysis indicates a significant shift towards digital transformation in this sector.",
        "From a strategic standpoint, I recommend pursuing a pilot program in this segment first.",
        "Competitive landscape assessment: 2 key players are vulnerable. Here's our opportunity window.",
        "Long-term strategic option: This positions us for market leadership within 18-24 months.",
    ],
    AgentRole.PMO_ANALYST: [
        "Governance check complete: Resource allocation variance is 8% vs baseline - within tolerance.",
        "I can generate a comprehensive PMO report covering budget, timeline, and risk metrics.",
        "Portfolio health assessment: This project is tracking green on all governance indicators.",
        "Compliance review: All deliverables meet our quality gates. Documentation is audit-ready.",
    ],
    AgentRole.GENERALIST: [
        "I'll help you with that request. Let me analyze this for you.",
    ],
}

COLLABORATIVE_RESPONSES = [
    "Based on our collective analysis across PM, BA, and Strategy perspectives, here's our recommended approach:",
    "Our integrated team assessment suggests a phased implementation strategy:",
    "From project, data, and governance viewpoints, we align on these key priorities:",
    "Cross-functional analysis complete. Here's what each discipline recommends:",
]

COLLABORATIVE_INSIGHTS = [
    "\n\n📊 **Data**: Metrics support this direction with 94% confidence",
    "\n🎯 **Strategy**: Aligns with Q2 objectives and market positioning",
    "\n📋 **Governance**: Meets all compliance requirements",
    "\n⏱️ **Timeline**: Achievable within current sprint capacity",
]

# (keywords, note) pairs checked against the lower-cased query
CONTEXTUAL_ADDITIONS: list[tuple[tuple[str, ...], str]] = [
    (("timeline", "schedule"), "⏰ Timeline consideration noted"),
    (("budget", "cost"), "💰 Budget impact will be assessed"),
    (("risk",), "⚠️ Risk analysis included"),
    (("priority", "urgent"), "🔥 Priority flag raised"),
]


def contextual_additions(query: str) -> list[str]:
    """Short notes triggered by keywords in the query"""
    lowered = query.lower()
    return [
        note for keywords, note in CONTEXTUAL_ADDITIONS
        if any(keyword in lowered for keyword in keywords)
    ]


def _roster_lines(agents: Iterable[Agent], with_description: bool = False) -> str:
    lines = []
    for agent in agents:
        speaker = f"{agent.avatar} {agent.name}".strip()
        line = f"• {speaker} ({agent.role_label})"
        if with_description and agent.description:
            line += f" - {agent.description}"
        lines.append(line)
    return "\n".join(lines)


class ResponseSynthesizer:
    """
    Produces the placeholder replies shown in the conversation.

    Replies are picked from fixed tables through a SelectionPort so tests
    can pin the choice.
    """

    def __init__(self, selection: SelectionPort):
        self.selection = selection

    def synthesize_agent_reply(self, agent: Agent, query: str) -> Message:
        """Reply from a single agent, worded for its role"""
        candidates = ROLE_RESPONSES.get(agent.role) or ROLE_RESPONSES[AgentRole.GENERALIST]
        reply = self.selection.choose(candidates)

        additions = contextual_additions(query)
        if additions:
            reply = f"{reply}\n\n{' • '.join(additions)}"

        speaker = f"{agent.avatar} {agent.name}".strip()
        return Message(
            content=f"**{speaker} ({agent.role_label})**: {reply}",
            sender=Sender.AGENT,
            agent_id=agent.id,
            visibility=Visibility.PROJECT,
            can_convert_to_task=True,
            can_convert_to_document=True,
        )

    def synthesize_collaborative_reply(self, query: str) -> Message:
        """Single reply on behalf of the whole team"""
        opener = self.selection.choose(COLLABORATIVE_RESPONSES)
        insight_count = self.selection.randint(2, 3)
        insights = "".join(COLLABORATIVE_INSIGHTS[:insight_count])

        return Message(
            content=f"{opener}{insights}",
            sender=Sender.AGENT,
            agent_id=COLLABORATIVE_AGENT_ID,
            visibility=Visibility.PROJECT,
            can_convert_to_task=True,
            can_convert_to_document=True,
        )

    # System messages never convert into tasks or documents

    def welcome_message(self, project: Project, agents: list[Agent]) -> Message:
        content = (
            f"Welcome to your AI Project Workspace! 🚀\n\n"
            f"Project: {project.name}\n"
            f"Client: {project.client.name}\n\n"
            f"Your specialized team of {len(agents)} AI agents is ready to assist:\n"
            f"{_roster_lines(agents, with_description=True)}\n\n"
            f"Use @mentions to direct questions to specific agents, "
            f"or ask general questions for collaborative responses."
        )
        return self._system_message(content)

    def project_switch_message(self, project: Project) -> Message:
        content = (
            f"Switched to project: {project.name} 🔄\n\n"
            f"Client: {project.client.name}\n"
            f"Status: {project.status.value}\n"
            f"Progress: {project.progress}%\n"
            f"Budget: {project.budget or '-'}\n"
            f"Team Size: {project.team_size}\n\n"
            f"Your AI team is now ready to assist with this project. "
            f"How can we help you today?"
        )
        return self._system_message(content)

    def team_update_message(self, project: Project, agents: list[Agent]) -> Message:
        content = (
            f"Agent team updated! 🤖\n\n"
            f"Active agents:\n{_roster_lines(agents)}\n\n"
            f"Your {len(agents)}-agent team is ready to assist with {project.name}."
        )
        return self._system_message(content)

    def _system_message(self, content: str) -> Message:
        return Message(
            content=content,
            sender=Sender.AGENT,
            agent_id=SYSTEM_AGENT_ID,
            visibility=Visibility.PROJECT,
            can_convert_to_task=False,
            can_convert_to_document=False,
        )
