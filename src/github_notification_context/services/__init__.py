"""Services subpackage."""

from github_notification_context.services.classification import (
    BuildContextFactory,
    HeadClassifier,
    ResultClassifier,
)
from github_notification_context.services.notification_assembler import (
    NotificationAssembler,
    resolve_notifications,
)

__all__ = [
    "BuildContextFactory",
    "HeadClassifier",
    "NotificationAssembler",
    "ResultClassifier",
    "resolve_notifications",
]
