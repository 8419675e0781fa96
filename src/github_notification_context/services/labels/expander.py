# -*- coding: utf-8 -*-
"""LabelExpander: expands macro tokens in a label, never failing the caller."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover
    from github_notification_context.notifications.types import DiagnosticSink, MacroExpander


class LabelExpander:
    """Run the injected macro expander over one label.

    A changed label is reported to the sink as an info record (before/after).
    Any error raised by the expander, or a result that is not a str, is
    reported as an error record and the original, unexpanded label is
    returned instead.
    """

    def __init__(self, expander: "MacroExpander", sink: "DiagnosticSink") -> None:
        self._expander = expander
        self._sink = sink

    def expand(self, label: str, build: Any) -> str:
        try:
            expanded = self._expander(label, build)
        except Exception as e:
            self._sink.error(
                "context_label_expansion_failed",
                exc=e,
                label=label,
            )
            return label
        if not isinstance(expanded, str):
            self._sink.error(
                "context_label_expansion_failed",
                label=label,
                returned_type=type(expanded).__name__,
            )
            return label
        if expanded != label:
            self._sink.info(
                "context_label_expanded",
                label=label,
                expanded_label=expanded,
            )
        return expanded
