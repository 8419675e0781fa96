"""Notification strategies."""

from github_notification_context.notifications.strategies.base import (
    BaseNotificationStrategy,
)
from github_notification_context.notifications.strategies.custom_context import (
    CustomContextNotificationStrategy,
)

__all__ = [
    "BaseNotificationStrategy",
    "CustomContextNotificationStrategy",
]
