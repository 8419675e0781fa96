"""Classification of host builds (pure logic, no I/O)."""

from github_notification_context.services.classification.build_context_factory import (
    BuildContextFactory,
    default_state_for,
)
from github_notification_context.services.classification.head_classifier import HeadClassifier
from github_notification_context.services.classification.result_classifier import (
    ResultClassifier,
)

__all__ = [
    "BuildContextFactory",
    "HeadClassifier",
    "ResultClassifier",
    "default_state_for",
]
