# -*- coding: utf-8 -*-
"""Notification config: one immutable value holding every context/message option.

Each option composes independently: suffixing, label splitting, per-result
filtering and per-result messages can be enabled in any combination.
Changing an option means building a new instance (see with_changes).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from github_notification_context.exceptions import MissingRequiredConfigError
from github_notification_context.models.result import ResultCategory
from github_notification_context.utils.text import is_blank

if TYPE_CHECKING:  # pragma: no cover
    from github_notification_context.config import NotificationSettings


@dataclass(frozen=True, slots=True)
class NotificationConfig:
    """Context label template plus reporting and message options.

    Value semantics: two configs are equal (and hash equal) iff all fields match.
    """

    context_label: str
    type_suffix: bool = False
    multiple_statuses: bool = False
    multiple_status_delimiter: str = ""

    report_success: bool = True
    report_unstable: bool = True
    report_failure: bool = True
    report_not_built: bool = True
    """NOT_BUILT and every other unlisted terminal result (OTHER)."""
    report_aborted: bool = True

    message_good: str = ""
    message_unstable: str = ""
    message_failure: str = ""
    message_aborted: str = ""
    message_other: str = ""
    message_pending: str = ""
    message_queued: str = ""

    per_result_messages: bool = True
    """False selects the legacy single-message behaviour."""

    @classmethod
    def from_settings(cls, settings: "NotificationSettings") -> NotificationConfig:
        """Build a config from NOTIFICATION__* settings.

        Raises:
            MissingRequiredConfigError: If the context label is blank.
        """
        if is_blank(settings.context_label):
            raise MissingRequiredConfigError("NOTIFICATION__CONTEXT_LABEL")
        return cls(
            context_label=settings.context_label,
            type_suffix=settings.type_suffix,
            multiple_statuses=settings.multiple_statuses,
            multiple_status_delimiter=settings.multiple_status_delimiter,
            report_success=settings.report_success,
            report_unstable=settings.report_unstable,
            report_failure=settings.report_failure,
            report_not_built=settings.report_not_built,
            report_aborted=settings.report_aborted,
            message_good=settings.message_good,
            message_unstable=settings.message_unstable,
            message_failure=settings.message_failure,
            message_aborted=settings.message_aborted,
            message_other=settings.message_other,
            message_pending=settings.message_pending,
            message_queued=settings.message_queued,
            per_result_messages=settings.per_result_messages,
        )

    def with_changes(self, **changes: Any) -> NotificationConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @property
    def report_filters(self) -> Mapping[ResultCategory, bool]:
        """Explicit include/exclude decision per terminal result.

        QUEUED and PENDING are absent, so they are always reported.
        """
        return MappingProxyType(
            {
                ResultCategory.SUCCESS: self.report_success,
                ResultCategory.UNSTABLE: self.report_unstable,
                ResultCategory.FAILURE: self.report_failure,
                ResultCategory.ABORTED: self.report_aborted,
                ResultCategory.OTHER: self.report_not_built,
            }
        )

    @property
    def message_overrides(self) -> Mapping[ResultCategory, str]:
        """Non-blank message overrides keyed by result category."""
        candidates = {
            ResultCategory.QUEUED: self.message_queued,
            ResultCategory.PENDING: self.message_pending,
            ResultCategory.SUCCESS: self.message_good,
            ResultCategory.UNSTABLE: self.message_unstable,
            ResultCategory.FAILURE: self.message_failure,
            ResultCategory.ABORTED: self.message_aborted,
            ResultCategory.OTHER: self.message_other,
        }
        return MappingProxyType(
            {category: text for category, text in candidates.items() if not is_blank(text)}
        )
