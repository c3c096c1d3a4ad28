"""Exception hierarchy for the workspace dispatch engine.

Raised only when the engine runs in strict mode; lenient mode logs and
carries on the way the chat UI always has.
"""
from __future__ import annotations

from typing import Sequence


class WorkspaceError(Exception):
    """Base exception for all workspace errors."""


class ValidationError(WorkspaceError):
    """A request carried nothing the engine can act on."""
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class UnknownAgentReference(WorkspaceError):
    """A mention or explicit target names no agent in the current team."""
    def __init__(self, references: Sequence[str]):
        self.references = list(references)
        super().__init__(
            f"Unknown agent reference(s): {', '.join(self.references)}"
        )


class ConfigurationError(WorkspaceError):
    """The workspace configuration is missing or malformed."""
    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid configuration for '{key}': {reason}")
