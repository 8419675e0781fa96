# -*- coding: utf-8 -*-
"""NotificationAssembler: config + build context -> ordered commit statuses.

Flow: classify once, filter (short-circuit to []), split labels, then per
label expand and suffix; the message is resolved once and shared by all
labels. URL, state and ignore-error come verbatim from the build context.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from github_notification_context.diagnostics.sinks import StructlogDiagnosticSink
from github_notification_context.models.notification_request import NotificationRequest
from github_notification_context.services.labels import (
    LabelExpander,
    MultiLabelSplitter,
    SuffixPolicy,
)
from github_notification_context.services.reporting import MessageResolver, ReportFilter
from github_notification_context.utils.text import is_blank

if TYPE_CHECKING:  # pragma: no cover
    from github_notification_context.models.build import BuildContext
    from github_notification_context.models.notification_config import NotificationConfig
    from github_notification_context.notifications.types import DiagnosticSink, MacroExpander


class NotificationAssembler:
    """Combines splitter, expander, suffix policy, filter and message resolver."""

    def __init__(
        self,
        *,
        expander: "MacroExpander",
        sink: "DiagnosticSink | None" = None,
        splitter: MultiLabelSplitter | None = None,
        report_filter: ReportFilter | None = None,
        message_resolver: MessageResolver | None = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the assembler.

        Args:
            expander: Macro expansion capability (host-provided).
            sink: Receives expansion diagnostics; defaults to a structlog-backed sink.
            splitter: Optional; defaults to MultiLabelSplitter().
            report_filter: Optional; defaults to ReportFilter().
            message_resolver: Optional; defaults to MessageResolver() with built-in texts.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._sink = sink or StructlogDiagnosticSink(get_logger=get_logger)
        self._label_expander = LabelExpander(expander, self._sink)
        self._splitter = splitter or MultiLabelSplitter()
        self._report_filter = report_filter or ReportFilter()
        self._message_resolver = message_resolver or MessageResolver()

    def assemble(
        self,
        config: "NotificationConfig",
        build_context: "BuildContext",
    ) -> list[NotificationRequest]:
        """Return the statuses to publish for build_context, in label order.

        Empty when the result category is filtered out or no non-blank label remains.
        """
        category = build_context.effective_result
        if not self._report_filter.should_report(category, config.report_filters):
            self._logger.debug(
                "notifications_suppressed",
                result_category=category.value,
            )
            return []

        labels = self._splitter.split(
            config.context_label,
            enabled=config.multiple_statuses,
            delimiter=config.multiple_status_delimiter,
        )
        suffix_policy = SuffixPolicy(config.type_suffix)
        contexts: list[str] = []
        for label in labels:
            expanded = self._label_expander.expand(label, build_context.build)
            if is_blank(expanded):
                continue
            contexts.append(suffix_policy.apply(expanded, build_context.head_kind))

        if not contexts:
            self._logger.debug(
                "notifications_no_contexts",
                context_label=config.context_label,
            )
            return []

        message = self._message_resolver.resolve(
            category,
            config.message_overrides,
            legacy=not config.per_result_messages,
            host_default=build_context.default_message,
        )
        requests = [
            NotificationRequest(
                context=context,
                target_url=build_context.default_target_url,
                message=message,
                state=build_context.default_state,
                ignore_error=build_context.default_ignore_error,
            )
            for context in contexts
        ]
        self._logger.debug(
            "notifications_resolved",
            result_category=category.value,
            head_kind=build_context.head_kind.value,
            contexts=contexts,
        )
        return requests


def resolve_notifications(
    config: "NotificationConfig",
    build_context: "BuildContext",
    *,
    expander: "MacroExpander",
    sink: "DiagnosticSink | None" = None,
) -> list[NotificationRequest]:
    """Resolve the commit statuses for one build-state change.

    Deterministic for identical inputs and identical expander behaviour; never raises.
    """
    return NotificationAssembler(expander=expander, sink=sink).assemble(config, build_context)
