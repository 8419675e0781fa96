"""GitHub notification context: commit-status contexts and messages for a build."""

from github_notification_context.config import get_settings
from github_notification_context.DI import Container
from github_notification_context.models import (
    BuildContext,
    BuildInfo,
    HeadKind,
    NotificationConfig,
    NotificationRequest,
    ResultCategory,
    SourceReference,
    StatusState,
)
from github_notification_context.notifications import CustomContextNotificationStrategy
from github_notification_context.services import (
    BuildContextFactory,
    NotificationAssembler,
    resolve_notifications,
)

__version__ = "0.1.0"
__all__ = [
    "BuildContext",
    "BuildContextFactory",
    "BuildInfo",
    "Container",
    "CustomContextNotificationStrategy",
    "HeadKind",
    "NotificationAssembler",
    "NotificationConfig",
    "NotificationRequest",
    "ResultCategory",
    "SourceReference",
    "StatusState",
    "get_settings",
    "resolve_notifications",
]
