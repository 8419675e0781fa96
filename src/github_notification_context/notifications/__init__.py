"""Notification subsystem."""

from github_notification_context.notifications.strategies import (
    BaseNotificationStrategy,
    CustomContextNotificationStrategy,
)
from github_notification_context.notifications.types import (
    DiagnosticSink,
    MacroExpander,
)

__all__ = [
    "BaseNotificationStrategy",
    "CustomContextNotificationStrategy",
    "DiagnosticSink",
    "MacroExpander",
]
