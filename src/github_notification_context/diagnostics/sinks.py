# -*- coding: utf-8 -*-
"""Diagnostic sinks: structlog-backed (service logs) and build-log style (line buffer)."""

from __future__ import annotations

import traceback
from collections.abc import Callable
from string import Formatter
from typing import Any

import structlog

DISPLAY_NAME = "Github Custom Notification Context"

EVENT_TEXT: dict[str, str] = {
    "context_label_expanded": "Expanded token macro from '{label}' to '{expanded_label}'",
    "context_label_expansion_failed": "Unable to expand GitHub Notification context macro '{label}'",
}


class StructlogDiagnosticSink:
    """Forward diagnostics to a structlog logger as snake_case events."""

    def __init__(
        self,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._logger = get_logger(logger_name or "NotificationContext")

    def info(self, message: str, **fields: Any) -> None:
        self._logger.info(message, **fields)

    def error(self, message: str, *, exc: BaseException | None = None, **fields: Any) -> None:
        if exc is not None:
            fields["error"] = str(exc)
            fields["error_type"] = type(exc).__name__
            fields["exc_info"] = exc
        self._logger.error(message, **fields)


class BuildLogDiagnosticSink:
    """Collect human-readable lines, as they would appear in a build's console log.

    Each line is prefixed with the feature's display name. Known events are
    rendered with their sentence from EVENT_TEXT; fields the sentence does not
    use are appended in parentheses. Errors are followed by the formatted
    traceback, when one is available.
    """

    def __init__(self, prefix: str = DISPLAY_NAME) -> None:
        self._prefix = prefix
        self.lines: list[str] = []
        self.errors: list[str] = []

    def info(self, message: str, **fields: Any) -> None:
        self.lines.append(self._format(message, fields))

    def error(self, message: str, *, exc: BaseException | None = None, **fields: Any) -> None:
        line = "ERROR: " + self._format(message, fields)
        self.lines.append(line)
        self.errors.append(line)
        if exc is not None:
            self.lines.extend(
                "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).splitlines()
            )

    def _format(self, message: str, fields: dict[str, Any]) -> str:
        text = message
        remaining = fields
        template = EVENT_TEXT.get(message)
        if template is not None:
            names = {name for _, name, _, _ in Formatter().parse(template) if name}
            if names <= fields.keys():
                text = template.format_map(fields)
                remaining = {key: value for key, value in fields.items() if key not in names}
        if not remaining:
            return f"{self._prefix}: {text}"
        details = ", ".join(f"{key}='{value}'" for key, value in remaining.items())
        return f"{self._prefix}: {text} ({details})"
