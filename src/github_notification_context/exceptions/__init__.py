"""Exceptions subpackage."""

from github_notification_context.exceptions.exceptions import (
    MacroExpansionError,
    MissingRequiredConfigError,
    NotificationContextError,
)

__all__ = [
    "MacroExpansionError",
    "MissingRequiredConfigError",
    "NotificationContextError",
]
