"""Domain models."""

from github_notification_context.models.build import BuildContext, BuildInfo
from github_notification_context.models.head import HeadKind, SourceReference
from github_notification_context.models.notification_config import NotificationConfig
from github_notification_context.models.notification_request import NotificationRequest
from github_notification_context.models.result import ResultCategory, StatusState

__all__ = [
    "BuildContext",
    "BuildInfo",
    "HeadKind",
    "NotificationConfig",
    "NotificationRequest",
    "ResultCategory",
    "SourceReference",
    "StatusState",
]
