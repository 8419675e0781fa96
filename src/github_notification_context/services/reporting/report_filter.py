"""ReportFilter: opt-out suppression of statuses by result category."""

from __future__ import annotations

from collections.abc import Mapping

from github_notification_context.models.result import ResultCategory


class ReportFilter:
    """A category missing from the filters is always reported.

    Configurations written before filtering existed carry no filters and
    therefore keep reporting everything.
    """

    def should_report(
        self,
        category: ResultCategory,
        filters: Mapping[ResultCategory, bool],
    ) -> bool:
        return filters.get(category, True)
