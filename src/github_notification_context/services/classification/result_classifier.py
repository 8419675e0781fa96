"""ResultClassifier: maps a raw build result onto a ResultCategory (pure, no I/O)."""

from __future__ import annotations

from typing import Optional

from github_notification_context.models.result import ResultCategory

_TERMINAL_RESULTS: dict[str, ResultCategory] = {
    "SUCCESS": ResultCategory.SUCCESS,
    "UNSTABLE": ResultCategory.UNSTABLE,
    "FAILURE": ResultCategory.FAILURE,
    "ABORTED": ResultCategory.ABORTED,
}


class ResultClassifier:
    """Pure classifier: raw result string (or None) to ResultCategory.

    - None: PENDING when a run exists, QUEUED otherwise.
    - SUCCESS / UNSTABLE / FAILURE / ABORTED: one-to-one (case-insensitive).
    - Anything else (NOT_BUILT, unknown future values): OTHER.
    """

    def classify(self, raw_result: Optional[str], *, has_run: bool = True) -> ResultCategory:
        if raw_result is None:
            return ResultCategory.PENDING if has_run else ResultCategory.QUEUED
        return _TERMINAL_RESULTS.get(raw_result.strip().upper(), ResultCategory.OTHER)
