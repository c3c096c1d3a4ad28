from __future__ import annotations
"""Notification Port - interface for user-facing toasts emitted by the engine"""

from abc import ABC, abstractmethod


class NotificationPort(ABC):
    """
    Port for short, transient user notifications (project switched, team updated).
    """

    @abstractmethod
    def notify(self, text: str, severity: str = "information") -> None:
        """
        Show a notification.

        Args:
            text: Message to show
            severity: "information", "warning" or "error"
        """
        pass


class NullNotifier(NotificationPort):
    """Discards notifications (headless use)"""

    def notify(self, text: str, severity: str = "information") -> None:
        pass
