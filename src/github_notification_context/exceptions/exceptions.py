"""Custom exceptions for notification context resolution."""

from __future__ import annotations


class NotificationContextError(Exception):
    """Base exception for notification-context errors."""

    pass


class MissingRequiredConfigError(NotificationContextError):
    """Raised when a required configuration value is missing."""

    pass


class MacroExpansionError(NotificationContextError):
    """Raised when a label template cannot be expanded."""

    def __init__(
        self,
        message: str,
        *,
        template: str | None = None,
        token: str | None = None,
    ) -> None:
        super().__init__(message)
        self.template = template
        self.token = token
