"""Macro expanders."""

from github_notification_context.macros.environment import EnvironmentMacroExpander

__all__ = ["EnvironmentMacroExpander"]
