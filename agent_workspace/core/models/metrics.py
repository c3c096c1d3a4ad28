from __future__ import annotations
"""Usage metrics shown on the workspace dashboard"""

from dataclasses import dataclass, replace


@dataclass
class ProjectMetrics:
    """
    Aggregate counters for a workspace.

    Only `active_agents` and `total_queries` are maintained by the dispatch
    engine; the rest are host-supplied figures carried for display.
    """
    active_agents: int = 0
    total_queries: int = 0
    success_rate: float = 95.0
    avg_response_time: str = "0.8s"
    tasks_generated: int = 0
    documents_created: int = 0

    def snapshot(self) -> "ProjectMetrics":
        """Detached copy for readers"""
        return replace(self)
