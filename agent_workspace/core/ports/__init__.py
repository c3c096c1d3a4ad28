from __future__ import annotations
"""Ports - interfaces for external dependencies (hexagonal architecture)"""

from .scheduler import SchedulerPort
from .selection import SelectionPort
from .notifications import NotificationPort, NullNotifier

__all__ = ["SchedulerPort", "SelectionPort", "NotificationPort", "NullNotifier"]
