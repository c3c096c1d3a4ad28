from __future__ import annotations
"""Agent Directory - the session's working copy of the agent team"""

import logging
from typing import Iterable, Iterator, Optional

from ..core.models import Agent, AgentStatus

logger = logging.getLogger(__name__)


class AgentDirectory:
    """
    Ordered, id-indexed working copy of the agents in a session.

    Agents are copied on the way in so the host roster is never mutated.
    The only writes are status transitions made by the dispatcher.
    """

    def __init__(self, agents: Iterable[Agent] = ()):
        self._agents: dict[str, Agent] = {}
        self.replace(agents)

    def replace(self, agents: Iterable[Agent]) -> None:
        """Swap in a new team (used by agent selection updates)"""
        self._agents = {}
        for agent in agents:
            if agent.id in self._agents:
                logger.warning("Duplicate agent id %s in team, keeping the first", agent.id)
                continue
            self._agents[agent.id] = agent.copy()

    def get(self, agent_id: str) -> Optional[Agent]:
        return self._agents.get(agent_id)

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._agents

    def __iter__(self) -> Iterator[Agent]:
        return iter(list(self._agents.values()))

    def __len__(self) -> int:
        return len(self._agents)

    @property
    def ids(self) -> list[str]:
        return list(self._agents)

    def snapshot(self) -> list[Agent]:
        """Detached copies of every agent, in team order"""
        return [agent.copy() for agent in self._agents.values()]

    def set_status(
        self,
        agent_ids: Iterable[str],
        status: AgentStatus,
        activity: Optional[str] = None,
    ) -> list[str]:
        """
        Move the given agents to `status`; ids no longer in the team are skipped.
        Returns the ids that were updated.
        """
        updated = []
        for agent_id in agent_ids:
            agent = self._agents.get(agent_id)
            if agent is None:
                continue
            agent.update_status(status, activity)
            updated.append(agent_id)
        return updated
