from __future__ import annotations
"""Dispatch Scheduler - routes a user message to agents and schedules their replies"""

import logging
from dataclasses import dataclass
from typing import Sequence

from ..core.errors import UnknownAgentReference, ValidationError
from ..core.models import AgentStatus, Attachment, Message, Sender, Visibility
from ..core.ports.scheduler import SchedulerPort
from .conversation import ConversationStore
from .directory import AgentDirectory
from .mentions import extract_mentions, find_unknown_mentions
from .metrics import MetricsAggregator
from .responses import ResponseSynthesizer

logger = logging.getLogger(__name__)

DEFAULT_RESPONSE_DELAY = 0.8  # seconds


@dataclass(frozen=True)
class DispatchPlan:
    """Resolved targets for one submitted message"""
    query: str
    target_ids: tuple[str, ...]
    collaborative: bool
    epoch: int


class DispatchScheduler:
    """
    Handles `submit_message`.

    - Appends the user message synchronously
    - Marks every target agent as thinking
    - Schedules one deferred delivery that appends the replies, restores the
      agents to active and updates the metrics

    Explicitly selected agents each reply on their own. With no selection the
    whole team thinks but a single collaborative reply is produced. Mentions
    are recorded on the user message and never change the targets.
    """

    def __init__(
        self,
        directory: AgentDirectory,
        conversation: ConversationStore,
        synthesizer: ResponseSynthesizer,
        metrics: MetricsAggregator,
        scheduler: SchedulerPort,
        response_delay: float = DEFAULT_RESPONSE_DELAY,
        strict: bool = False,
    ):
        self.directory = directory
        self.conversation = conversation
        self.synthesizer = synthesizer
        self.metrics = metrics
        self.scheduler = scheduler
        self.response_delay = response_delay
        self.strict = strict

        self._pending = 0
        # Bumped on project switch so late deliveries can be recognised
        self._epoch = 0

    @property
    def pending_dispatches(self) -> int:
        """Deferred deliveries scheduled but not yet run"""
        return self._pending

    def advance_epoch(self) -> None:
        """Called when the conversation is reset for another project"""
        self._epoch += 1

    def submit_message(
        self,
        content: str,
        target_agent_ids: Sequence[str] = (),
        visibility: Visibility | str = Visibility.PROJECT,
        attachments: Sequence[Attachment] = (),
    ) -> None:
        """Record a user message and dispatch it to the resolved agents"""
        query = content.strip()
        if not query and not attachments:
            if self.strict:
                raise ValidationError("Message cannot be empty")
            logger.debug("Ignoring empty submission")
            return

        agents = list(self.directory)
        explicit = list(dict.fromkeys(target_agent_ids))
        unknown_targets = [agent_id for agent_id in explicit if agent_id not in self.directory]

        unknown_mentions = find_unknown_mentions(query, agents)
        if self.strict:
            unknown = unknown_mentions + unknown_targets
            if unknown:
                raise UnknownAgentReference(unknown)
        elif unknown_mentions:
            logger.info("Ignoring mention(s) of unknown agents: %s", ", ".join(unknown_mentions))

        mentions = extract_mentions(query, agents)
        user_message = Message(
            content=query,
            sender=Sender.USER,
            mentions=tuple(mentions),
            attachments=tuple(attachments),
            visibility=Visibility(visibility),
            can_convert_to_task=False,
            can_convert_to_document=False,
        )
        self.conversation.append(user_message)

        plan = self._resolve_targets(query, explicit, unknown_targets)
        self.directory.set_status(plan.target_ids, AgentStatus.THINKING)

        logger.debug(
            "Dispatching %s to %d agent(s) (%s, mentions=%s)",
            user_message.id,
            len(plan.target_ids),
            "collaborative" if plan.collaborative else "individual",
            mentions,
        )

        self._pending += 1
        self.scheduler.call_later(self.response_delay, lambda: self._deliver(plan))

    def _resolve_targets(
        self,
        query: str,
        explicit: list[str],
        unknown_targets: list[str],
    ) -> DispatchPlan:
        if explicit:
            if unknown_targets:
                logger.warning("Dropping unknown target agent(s): %s", ", ".join(unknown_targets))
            known = tuple(agent_id for agent_id in explicit if agent_id not in unknown_targets)
            if not known:
                logger.warning("No known agents among the selected targets, no replies will follow")
            return DispatchPlan(query=query, target_ids=known, collaborative=False, epoch=self._epoch)

        return DispatchPlan(
            query=query,
            target_ids=tuple(self.directory.ids),
            collaborative=True,
            epoch=self._epoch,
        )

    def _deliver(self, plan: DispatchPlan) -> None:
        """Deferred part of a dispatch; runs once the thinking delay has elapsed"""
        self._pending -= 1

        if plan.epoch != self._epoch:
            logger.info("Delivering replies to a conversation that was reset after dispatch")

        # Taken before the targets are restored; active_agents lags by one step
        before_restore = self.directory.snapshot()

        if plan.collaborative:
            replies = [self.synthesizer.synthesize_collaborative_reply(plan.query)]
        else:
            replies = []
            for agent_id in plan.target_ids:
                agent = self.directory.get(agent_id)
                if agent is None:
                    logger.info("Agent %s left the team before replying", agent_id)
                    continue
                replies.append(self.synthesizer.synthesize_agent_reply(agent, plan.query))

        self.conversation.extend(replies)
        self.directory.set_status(plan.target_ids, AgentStatus.ACTIVE, activity="just now")

        self.metrics.record_query()
        self.metrics.recompute(before_restore)

        logger.debug("Delivered %d reply(ies); %d dispatch(es) pending", len(replies), self._pending)
