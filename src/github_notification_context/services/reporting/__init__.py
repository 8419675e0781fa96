"""Reporting decisions: filtering and message selection."""

from github_notification_context.services.reporting.message_resolver import (
    DEFAULT_MESSAGES,
    MessageResolver,
)
from github_notification_context.services.reporting.report_filter import ReportFilter

__all__ = ["DEFAULT_MESSAGES", "MessageResolver", "ReportFilter"]
