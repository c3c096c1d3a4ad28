from __future__ import annotations
"""Runtime - mention parsing, dispatch scheduling and conversation state"""

from .conversation import ConversationStore
from .directory import AgentDirectory
from .dispatch import DispatchScheduler
from .mentions import extract_mentions, find_unknown_mentions
from .metrics import MetricsAggregator
from .responses import ResponseSynthesizer
from .session import WorkspaceSession

__all__ = [
    "ConversationStore",
    "AgentDirectory",
    "DispatchScheduler",
    "extract_mentions",
    "find_unknown_mentions",
    "MetricsAggregator",
    "ResponseSynthesizer",
    "WorkspaceSession",
]
