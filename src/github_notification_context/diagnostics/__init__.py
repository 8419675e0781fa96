"""Diagnostic sinks."""

from github_notification_context.diagnostics.sinks import (
    DISPLAY_NAME,
    BuildLogDiagnosticSink,
    StructlogDiagnosticSink,
)

__all__ = ["DISPLAY_NAME", "BuildLogDiagnosticSink", "StructlogDiagnosticSink"]
