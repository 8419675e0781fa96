"""Logging subpackage."""

from github_notification_context.logging.config import build_processors, configure_logging

__all__ = ["build_processors", "configure_logging"]
