"""Dependency injection."""

from github_notification_context.DI.container import Container

__all__ = ["Container"]
