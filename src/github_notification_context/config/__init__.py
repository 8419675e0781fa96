"""Configuration subpackage."""

from github_notification_context.config.config import (
    AppSettings,
    LoggingSettings,
    NotificationSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "LoggingSettings",
    "NotificationSettings",
    "Settings",
    "get_settings",
]
