from __future__ import annotations
"""Workspace Session - the host-facing facade over the dispatch engine"""

import logging
from typing import Iterable, Optional, Sequence

from ..core.errors import ValidationError
from ..core.models import Agent, Attachment, Message, Project, ProjectMetrics, Visibility
from ..core.ports.notifications import NotificationPort, NullNotifier
from ..core.ports.scheduler import SchedulerPort
from ..core.ports.selection import SelectionPort
from .conversation import ConversationStore
from .directory import AgentDirectory
from .dispatch import DEFAULT_RESPONSE_DELAY, DispatchScheduler
from .metrics import DashboardData, MetricsAggregator
from .responses import ResponseSynthesizer

logger = logging.getLogger(__name__)


class WorkspaceSession:
    """
    One user's conversation with a project's AI team.

    - Holds the project, the working agent team and the conversation
    - Exposes the operations the UI calls (submit, switch project, update team)
    - Exposes read accessors for rendering
    """

    def __init__(
        self,
        project: Project,
        roster: Iterable[Agent],
        scheduler: SchedulerPort,
        selection: SelectionPort,
        notifier: Optional[NotificationPort] = None,
        initial_metrics: Optional[ProjectMetrics] = None,
        response_delay: float = DEFAULT_RESPONSE_DELAY,
        strict: bool = False,
    ):
        self._project = project
        # Full roster from the host; the team is always a subset of it
        self._roster: list[Agent] = [agent.copy() for agent in roster]
        self.notifier = notifier or NullNotifier()
        self.strict = strict

        self.directory = AgentDirectory(self._roster)
        self.synthesizer = ResponseSynthesizer(selection)
        self.metrics_aggregator = MetricsAggregator(initial_metrics)
        self.metrics_aggregator.recompute(self.directory)

        self.conversation = ConversationStore()
        self.conversation.append(
            self.synthesizer.welcome_message(project, self.directory.snapshot())
        )

        self.dispatcher = DispatchScheduler(
            directory=self.directory,
            conversation=self.conversation,
            synthesizer=self.synthesizer,
            metrics=self.metrics_aggregator,
            scheduler=scheduler,
            response_delay=response_delay,
            strict=strict,
        )

    # Read accessors

    @property
    def project(self) -> Project:
        return self._project

    @property
    def agents(self) -> list[Agent]:
        return self.directory.snapshot()

    @property
    def roster(self) -> list[Agent]:
        return [agent.copy() for agent in self._roster]

    @property
    def metrics(self) -> ProjectMetrics:
        return self.metrics_aggregator.metrics

    @property
    def messages(self) -> tuple[Message, ...]:
        return self.conversation.messages

    @property
    def pending_dispatches(self) -> int:
        return self.dispatcher.pending_dispatches

    # Operations

    def submit_message(
        self,
        content: str,
        target_agent_ids: Sequence[str] = (),
        visibility: Visibility | str = Visibility.PROJECT,
        attachments: Sequence[Attachment] = (),
    ) -> None:
        """Fire-and-forget: replies arrive after the response delay"""
        self.dispatcher.submit_message(content, target_agent_ids, visibility, attachments)

    def switch_project(self, project: Project) -> None:
        """Start over with another project; in-flight replies are not cancelled"""
        self._project = project
        self.dispatcher.advance_epoch()
        self.conversation.reset(self.synthesizer.project_switch_message(project))
        self.metrics_aggregator.reset_for_project(self.directory)

        if self.pending_dispatches:
            logger.info(
                "Switched to %s with %d dispatch(es) still pending",
                project.id,
                self.pending_dispatches,
            )
        else:
            logger.info("Switched to project %s", project.id)

        self.notifier.notify(f"🔄 Switched to project: {project.name}")

    def update_agent_selection(self, agent_ids: Sequence[str]) -> None:
        """Make the team the roster agents whose ids are listed, in roster order"""
        wanted = set(agent_ids)
        team = [agent for agent in self._roster if agent.id in wanted]

        if not team:
            if self.strict:
                raise ValidationError("At least one agent must be selected")
            logger.warning("Ignoring team update with no known agents: %s", list(agent_ids))
            self.notifier.notify("At least one agent must be selected", severity="warning")
            return

        self.directory.replace(team)
        self.metrics_aggregator.recompute(self.directory)
        self.conversation.append(
            self.synthesizer.team_update_message(self._project, self.directory.snapshot())
        )

        logger.info("Team updated: %s", ", ".join(self.directory.ids))
        self.notifier.notify(f"Team updated: {len(team)} agents active")

    # Display helpers

    def get_dashboard_data(self, limit: int = 10) -> DashboardData:
        return self.metrics_aggregator.get_dashboard_data(
            self._project,
            self.directory.snapshot(),
            self.conversation.recent(limit),
            pending_dispatches=self.pending_dispatches,
        )

    def get_summary(self) -> str:
        return self.metrics_aggregator.get_summary(self.directory.snapshot())
